"""Text front end: welcome screen, sign-up form and player console."""

from __future__ import annotations

import argparse
import os
import shlex
import sys
from pathlib import Path

from tunebox.accounts import DatabaseError, SignUpError, UserStore, default_database_path, validate_signup
from tunebox.player import Player
from tunebox.playlist import Playlist, playlist_path

_FORM = ("Username", "Password", "Name", "Age")


class _Window:
    def __init__(self, base_dir=".", read=None, out=None, backend=None):
        self.base_dir = Path(os.fspath(base_dir))
        self._read = read if read is not None else input
        self._out = out
        self._backend = backend

    def _say(self, text):
        print(text, file=self._out if self._out is not None else sys.stdout)


class WelcomeWindow(_Window):
    """First screen: go on to sign up, or quit."""

    def __init__(self, base_dir=".", read=None, out=None, backend_factory=None):
        super().__init__(base_dir, read, out, backend_factory)

    def run(self):
        self._say("Welcome to tunebox")
        while True:
            try:
                choice = self._read("[s]ign up, [q]uit: ").strip().lower()
            except EOFError:
                return
            if choice in ("s", "signup", "sign up"):
                SignUpWindow(self.base_dir, self._read, self._out, self._backend).run()
                return
            if choice in ("q", "quit"):
                return
            self._say(f"Unknown choice: {choice}")


class SignUpWindow(_Window):
    """Form that creates an account and then opens the player."""

    def __init__(self, base_dir=".", read=None, out=None, backend_factory=None):
        super().__init__(base_dir, read, out, backend_factory)
        try:
            self._store: UserStore | None = UserStore(default_database_path(self.base_dir))
            self._say("Connected...")
        except DatabaseError:
            self._store = None
            self._say("Failed to open database")

    def _register(self, username, secret, name, age):
        if self._store is None:
            validate_signup(secret, age)
            raise DatabaseError("Failed to open database")
        return self._store.sign_up(username, secret, name, age)

    def run(self):
        try:
            while True:
                try:
                    answers = {field: self._read(f"{field}: ") for field in _FORM}
                except EOFError:
                    return
                try:
                    user = self._register(
                        answers["Username"].strip(),
                        answers["Password"],
                        answers["Name"].strip(),
                        answers["Age"].strip(),
                    )
                    break
                except (SignUpError, DatabaseError) as exc:
                    self._say(str(exc))
        finally:
            if self._store is not None:
                self._store.close()
        backend = self._backend() if self._backend else None
        PlayerWindow(user, self.base_dir, self._read, self._out, backend).run()


class PlayerWindow(_Window):
    """Console for building a playlist and controlling playback."""

    def __init__(self, username, base_dir=".", read=None, out=None, backend=None):
        super().__init__(base_dir, read, out, backend)
        self.username = username
        self.playlist = Playlist()
        self.player = Player(self.playlist, backend)

    def run(self):
        self._say(self.username)
        while True:
            try:
                words = shlex.split(self._read("> "))
            except EOFError:
                break
            except ValueError as exc:
                self._say(f"Cannot read command: {exc}")
                continue
            if not words:
                continue
            command, args = words[0].lower(), words[1:]
            if command in ("quit", "q"):
                break
            handler = getattr(self, f"_cmd_{command}", None)
            if handler is None:
                self._say(f"Unknown command: {command}")
            else:
                handler(args)
        self.player.stop()

    def _show_track(self, path):
        self._say("Stopped" if path is None else f"Now: {os.path.basename(path)}")

    def _number(self, args):
        try:
            return int(args[0])
        except (IndexError, ValueError):
            self._say("A whole number is needed")
            return None

    def _cmd_add(self, args):
        for path in args:
            self._say(f"Added {self.playlist.add(path)}")

    def _cmd_drop(self, args):
        for name in self.playlist.add_dropped(args):
            self._say(f"Added {name}")

    def _cmd_delete(self, args):
        try:
            self.playlist.remove(int(args[0]) - 1)
        except (IndexError, ValueError):
            self._say("No such entry")

    def _cmd_list(self, args):
        for number, name in enumerate(self.playlist.names(), start=1):
            marker = "*" if self.playlist.current == number - 1 else " "
            self._say(f"{marker}{number}. {name}")

    def _cmd_play(self, args):
        path = self.player.play()
        self._say("Playlist is empty" if path is None else f"Playing {os.path.basename(path)}")

    def _cmd_pause(self, args):
        self.player.pause()

    def _cmd_stop(self, args):
        self.player.stop()

    def _cmd_next(self, args):
        self._show_track(self.player.next())

    def _cmd_prev(self, args):
        self._show_track(self.player.previous())

    def _cmd_volume(self, args):
        value = self._number(args)
        if value is not None:
            self._say(f"Volume {self.player.set_volume(value)}")

    def _cmd_seek(self, args):
        value = self._number(args)
        if value is not None:
            self.player.seek(value)

    def _cmd_save(self, args):
        target = playlist_path(self.base_dir, self.username)
        self._say(f"path to playlist {target}")
        try:
            self.playlist.save(target)
            self._say("Playlist saved succesfully")
        except OSError as exc:
            self._say(f"Cannot save playlist: {exc}")

    def _cmd_open(self, args):
        self.player.stop()
        count = self.playlist.load(playlist_path(self.base_dir, self.username))
        self._say(f"Loaded {count} tracks")


def build_parser():
    parser = argparse.ArgumentParser(prog="tunebox", description="Music player with user accounts.")
    parser.add_argument(
        "--base-dir",
        default=".",
        help="directory holding db/users.db and playlist/ (default: current directory)",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        WelcomeWindow(args.base_dir).run()
    except KeyboardInterrupt:
        return 130
    return 0