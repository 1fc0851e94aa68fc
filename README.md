# tunebox

A small console music player with local user accounts. A user signs up and
is then taken to a player console where they build a playlist, play, pause,
stop, seek and skip tracks, set the volume, and save or reopen their own
playlist. Audio output goes through the `pygame` mixer.

## Installing

```
pip install .
```

## Running

```
tunebox [--base-dir DIR]
```

`--base-dir` is the directory that holds `db/users.db` and `playlist/`; it
defaults to the current directory.

The welcome screen offers `s` (sign up) or `q` (quit).

Signing up asks for a username, a password, a name and an age:

- the password must be at least 3 characters long;
- the age must be a whole number greater than 13;
- the username must not already exist.

On a problem the reason is printed and the form is asked again. Accounts are
stored in the SQLite database `db/users.db` under the base directory; the
`users` table is created if it is missing, but the `db` directory must exist.

## Player commands

After signing up, the player console prints the username and reads commands
(arguments are split shell-style, so quote paths with spaces):

| Command | Effect |
| --- | --- |
| `add PATH...` | append local files to the playlist |
| `drop URL...` | append files given as `file://` URLs |
| `delete N` | remove entry number `N` (counting from 1) |
| `list` | show the playlist; `*` marks the current track |
| `play` | start playback, or resume after a pause |
| `pause` | pause playback |
| `stop` | stop playback |
| `next` / `prev` | move to the following / preceding track |
| `volume N` | set the volume in percent, clamped to 0–100 |
| `seek MS` | jump to a position in milliseconds |
| `save` | write the playlist to `playlist/<username>playlist.txt` |
| `open` | stop and replace the playlist with the saved one |
| `quit` / `q` | stop playback and leave |

A saved playlist holds one `file://` URL per line. Opening it strips the
`file://` prefix from each line and skips blank lines; a missing or
unreadable file leaves the playlist empty. Moving past the last track or
before the first one leaves no current track and stops playback.

## What it does not do

- There is no log-in screen: existing accounts cannot be signed into, so
  each run creates a new account before the player opens.
- Track metadata (title, artist, album) is not read or shown.
- Track positions and durations are only what is set through `seek`,
  `Player.on_position_changed` and `Player.on_duration_changed`; nothing
  reports them from the audio output.

## Using it as a library

```python
from tunebox.accounts import UserStore, default_database_path
from tunebox.playlist import Playlist, playlist_path
from tunebox.player import Player

with UserStore(default_database_path(".")) as store:
    store.sign_up("alice", "password", "Alice", 30)

playlist = Playlist()
playlist.add("/music/song.mp3")
playlist.save(playlist_path(".", "alice"))
print(playlist.names())          # ['song.mp3']

player = Player(playlist)        # uses the pygame mixer
player.play()
```

- `tunebox.accounts`: `validate_signup`, `default_database_path` and
  `UserStore` (`sign_up`, `count_users`, `close`, usable as a context
  manager). Invalid form values raise `SignUpError`; an existing username
  raises `UserExistsError` (a `SignUpError`); database problems raise
  `DatabaseError`.
- `tunebox.playlist`: `Playlist` (`add`, `add_dropped`, `remove`, `clear`,
  `next`, `previous`, `names`, `save`, `load`, `current`, `current_path`,
  `len()` and iteration) and `playlist_path`.
- `tunebox.player`: `Player` and `PlayerState`. `Player(playlist, backend)`
  accepts any backend object with `load(path)`, `play(start_seconds)`,
  `pause()`, `resume()`, `stop()` and `set_volume(fraction)`; without one it
  opens the pygame mixer.
- `tunebox.app`: `WelcomeWindow`, `SignUpWindow`, `PlayerWindow`,
  `build_parser` and `main`.

## Running the tests

```
pip install .[test]
pytest
```