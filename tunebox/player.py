"""Playback control over a playlist."""

from __future__ import annotations

from enum import Enum

from tunebox.playlist import Playlist


class PlayerState(Enum):
    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


class PygameBackend:
    """Audio output through the pygame mixer."""

    def __init__(self):
        import pygame

        pygame.mixer.init()
        self._music = music = pygame.mixer.music
        self.load, self.pause, self.resume = music.load, music.pause, music.unpause
        self.stop, self.set_volume = music.stop, music.set_volume

    def play(self, start=0.0):
        self._music.play(start=start)


class Player:
    """Plays the current track of a playlist; positions are in milliseconds."""

    def __init__(self, playlist: Playlist, backend=None):
        self.playlist = playlist
        self._backend = backend if backend is not None else PygameBackend()
        self.state = PlayerState.STOPPED
        self.volume = 100
        self.position = 0
        self.duration = 0
        self._backend.set_volume(1.0)

    def _start(self, path, start_ms=0):
        self._backend.load(path)
        self._backend.play(start_ms / 1000)
        self.state = PlayerState.PLAYING
        self.position = start_ms

    def play(self):
        """Start or resume playback; return the path playing, or None."""
        if self.state is PlayerState.PAUSED:
            self._backend.resume()
            self.state = PlayerState.PLAYING
        elif self.state is PlayerState.STOPPED and len(self.playlist):
            if self.playlist.current is None:
                self.playlist.next()
            self._start(self.playlist.current_path)
        return self.playlist.current_path if len(self.playlist) else None

    def pause(self):
        if self.state is PlayerState.PLAYING:
            self._backend.pause()
            self.state = PlayerState.PAUSED

    def stop(self):
        if self.state is not PlayerState.STOPPED:
            self._backend.stop()
            self.state = PlayerState.STOPPED
        self.position = 0

    def _follow(self, path):
        if path is not None and self.state is PlayerState.PLAYING:
            self._start(path)
        else:
            self.stop()
        return path

    def next(self):
        return self._follow(self.playlist.next())

    def previous(self):
        return self._follow(self.playlist.previous())

    def set_volume(self, volume):
        """Set the volume in percent, clamped to 0..100, and return it."""
        self.volume = max(0, min(100, int(volume)))
        self._backend.set_volume(self.volume / 100)
        return self.volume

    def seek(self, position):
        """Jump to ``position`` milliseconds into the current track."""
        position = max(0, int(position))
        path = self.playlist.current_path
        if self.state is not PlayerState.STOPPED and path is not None:
            paused = self.state is PlayerState.PAUSED
            self._start(path, position)
            if paused:
                self.pause()
        self.position = position
        return position

    def on_position_changed(self, position):
        self.position = max(0, min(int(position), self.duration))
        return self.position

    def on_duration_changed(self, duration):
        self.duration = max(0, int(duration))
        self.position = min(self.position, self.duration)
        return self.duration