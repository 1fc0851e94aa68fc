"""An ordered list of local audio files, saved as M3U text."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path
from urllib.parse import unquote, urlparse

_FILE_SCHEME = "file://"


def playlist_path(base_dir, username):
    """Return where the playlist of ``username`` is kept below ``base_dir``."""
    return Path(base_dir) / "playlist" / f"{username}playlist.txt"


class Playlist:
    """Tracks in play order, with an optional current position."""

    def __init__(self):
        self._entries: list[str] = []
        self._current: int | None = None

    @property
    def current(self) -> int | None:
        """Index of the current track, or None when there is none."""
        return self._current

    @property
    def current_path(self) -> str | None:
        """Path of the current track, or None when there is none."""
        return None if self._current is None else self._entries[self._current]

    def add(self, path):
        """Append a file and return the name shown for it."""
        path = os.fspath(path)
        self._entries.append(path)
        return os.path.basename(path)

    def add_dropped(self, urls: Iterable[str]):
        """Append files given as ``file://`` URLs and return their names."""
        return [self.add(unquote(urlparse(url).path)) for url in urls]

    def remove(self, index):
        """Remove the entry at ``index``."""
        if not 0 <= index < len(self._entries):
            raise IndexError(f"no playlist entry at {index}")
        del self._entries[index]
        if self._current is not None:
            if index == self._current:
                self._current = None
            elif index < self._current:
                self._current -= 1

    def clear(self):
        self._entries.clear()
        self._current = None

    def next(self):
        """Move to the following track; past the end there is no current track."""
        if not self._entries:
            self._current = None
        else:
            position = 0 if self._current is None else self._current + 1
            self._current = position if position < len(self._entries) else None
        return self.current_path

    def previous(self):
        """Move to the preceding track; before the start there is no current track."""
        if not self._entries:
            self._current = None
        else:
            position = len(self._entries) - 1 if self._current is None else self._current - 1
            self._current = position if position >= 0 else None
        return self.current_path

    def names(self):
        return [os.path.basename(entry) for entry in self._entries]

    def save(self, path):
        """Write the playlist as one ``file://`` URL per line."""
        text = "".join(f"{_FILE_SCHEME}{entry}\n" for entry in self._entries)
        Path(path).write_text(text, encoding="utf-8")

    def load(self, path):
        """Replace the contents with the playlist at ``path``; return the track count.

        A file that cannot be read leaves the playlist empty.
        """
        self.clear()
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError:
            return 0
        for line in text.splitlines():
            song = line.replace(_FILE_SCHEME, "")
            if song.strip():
                self.add(song)
        return len(self)

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))