"""User accounts kept in a SQLite database."""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path

MIN_PASSWORD_LENGTH = 3
MIN_AGE = 13

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT,
    age INTEGER,
    username TEXT,
    password TEXT
)
"""


class SignUpError(Exception):
    """The sign-up form holds values that cannot be accepted."""


class UserExistsError(SignUpError):
    """An account with the requested username already exists."""


class DatabaseError(Exception):
    """The user database cannot be opened or queried."""


def validate_signup(password, age):
    """Check the password and age of a new account and return the age as an int."""
    if len(password) < MIN_PASSWORD_LENGTH:
        raise SignUpError("Password must be min 3 chars long")
    try:
        years = int(age)
    except (TypeError, ValueError):
        raise SignUpError(f"Age must be a whole number, not {age!r}") from None
    if years <= MIN_AGE:
        raise SignUpError("You have to be at least 13 years to sign in")
    return years


def default_database_path(base_dir):
    """Return the location of the user database below ``base_dir``."""
    return Path(base_dir) / "db" / "users.db"


class UserStore:
    """Accounts stored in the ``users`` table of a SQLite file."""

    def __init__(self, path):
        self.path = Path(os.fspath(path))
        try:
            self._conn: sqlite3.Connection | None = sqlite3.connect(self.path)
            self._conn.execute(_SCHEMA)
            self._conn.commit()
        except sqlite3.Error as exc:
            raise DatabaseError(f"Failed to open database: {exc}") from exc

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise DatabaseError("Failed to open database")
        return self._conn

    def close(self):
        """Close the database; further queries raise DatabaseError."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def count_users(self, username):
        """Return how many accounts carry ``username``."""
        try:
            row = self._connection().execute(
                "SELECT COUNT(*) FROM users WHERE username = ?", (username,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise DatabaseError(f"Error with finding data in users.db: {exc}") from exc
        return row[0]

    def sign_up(self, username, password, name, age):
        """Create an account and return the username it was created under."""
        years = validate_signup(password, age)
        conn = self._connection()
        if self.count_users(username) >= 1:
            raise UserExistsError("such user already exists")
        try:
            with conn:
                conn.execute(
                    "INSERT INTO users (id, name, age, username, password) "
                    "VALUES (NULL, ?, ?, ?, ?)",
                    (name, years, username, password),
                )
        except sqlite3.Error as exc:
            raise DatabaseError(f"Cannot store user {username!r}: {exc}") from exc
        return username

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()