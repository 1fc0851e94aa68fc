"""A small console music player with local user accounts and per-user playlists."""

__version__ = "0.1.0"