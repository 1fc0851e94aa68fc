import io

import pytest

from tunebox.accounts import UserStore
from tunebox.app import PlayerWindow, SignUpWindow, WelcomeWindow, build_parser, main

PASSWORD = "password"


class FakeBackend:
    def __init__(self):
        self.loaded = []

    def load(self, path):
        self.loaded.append(path)

    def play(self, start=0.0):
        pass

    def pause(self):
        pass

    def resume(self):
        pass

    def stop(self):
        pass

    def set_volume(self, level):
        pass


def scripted(*lines):
    remaining = list(lines)

    def read(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


@pytest.fixture
def base(tmp_path):
    (tmp_path / "db").mkdir()
    (tmp_path / "playlist").mkdir()
    return tmp_path


def test_sign_up_then_save_playlist(base):
    out = io.StringIO()
    read = scripted(
        "s", "alice", PASSWORD, "Alice", "20",
        "add /music/a.mp3", "play", "save", "quit",
    )
    WelcomeWindow(base, read, out, backend_factory=FakeBackend).run()
    text = out.getvalue()
    assert "Connected..." in text
    assert "Playlist saved succesfully" in text
    saved = base / "playlist" / "aliceplaylist.txt"
    assert saved.read_text(encoding="utf-8") == "file:///music/a.mp3\n"
    with UserStore(base / "db" / "users.db") as users:
        assert users.count_users("alice") == 1


def test_short_password_is_reported(base):
    out = io.StringIO()
    SignUpWindow(base, scripted("bob", "pw", "Bob", "20"), out).run()
    assert "Password must be min 3 chars long" in out.getvalue()
    with UserStore(base / "db" / "users.db") as users:
        assert users.count_users("bob") == 0


def test_existing_user_is_reported(base):
    with UserStore(base / "db" / "users.db") as users:
        users.sign_up("carol", PASSWORD, "Carol", "30")
    out = io.StringIO()
    SignUpWindow(base, scripted("carol", PASSWORD, "C", "31"), out).run()
    assert "such user already exists" in out.getvalue()


def test_missing_database_is_reported(tmp_path):
    out = io.StringIO()
    SignUpWindow(tmp_path, scripted("dave", PASSWORD, "Dave", "40"), out).run()
    assert out.getvalue().count("Failed to open database") == 2


def test_open_restores_saved_playlist(base):
    (base / "playlist" / "eveplaylist.txt").write_text(
        "file:///music/x.mp3\nfile:///music/y.mp3\n", encoding="utf-8"
    )
    out = io.StringIO()
    window = PlayerWindow("eve", base, scripted("open", "list"), out, FakeBackend())
    window.run()
    assert window.playlist.names() == ["x.mp3", "y.mp3"]
    assert "y.mp3" in out.getvalue()


def test_drop_and_play_loads_track(base):
    backend = FakeBackend()
    window = PlayerWindow(
        "frank", base, scripted("drop file:///music/My%20Song.mp3", "play"), io.StringIO(), backend
    )
    window.run()
    assert backend.loaded == ["/music/My Song.mp3"]


def test_delete_removes_entry(base):
    window = PlayerWindow(
        "gina", base, scripted("add /a.mp3 /b.mp3", "delete 1"), io.StringIO(), FakeBackend()
    )
    window.run()
    assert window.playlist.names() == ["b.mp3"]


def test_play_on_empty_playlist(base):
    out = io.StringIO()
    PlayerWindow("hal", base, scripted("play"), out, FakeBackend()).run()
    assert "Playlist is empty" in out.getvalue()


def test_parser_base_dir():
    assert build_parser().parse_args(["--base-dir", "data"]).base_dir == "data"
    assert build_parser().parse_args([]).base_dir == "."


def test_main_quits_on_end_of_input(tmp_path, monkeypatch, capsys):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main(["--base-dir", str(tmp_path)]) == 0
    assert "tunebox" in capsys.readouterr().out