"""A persistent key-value store of users kept in an on-disk database."""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path
from types import TracebackType

from lassdb.user import User

_DB_FILE = "users.sqlite3"


class UserStore:
    """Stores users as JSON under string keys in a database directory."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self.path.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(self.path / _DB_FILE)
        with self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS users ("
                "key TEXT PRIMARY KEY, value BLOB NOT NULL)"
            )

    def put(self, key: str, user: User) -> None:
        """Store ``user`` under ``key``, replacing any previous value, and flush."""
        if not isinstance(user, User):
            raise TypeError(f"expected a User, got {type(user).__name__}")
        value = user.to_json().encode("utf-8")
        with self._conn:
            self._conn.execute(
                "INSERT OR REPLACE INTO users (key, value) VALUES (?, ?)",
                (key, value),
            )

    def get(self, key: str) -> User | None:
        """Return the user stored under ``key``, or None if there is none."""
        row = self._conn.execute(
            "SELECT value FROM users WHERE key = ?", (key,)
        ).fetchone()
        if row is None:
            return None
        return User.from_json(row[0])

    def delete(self, key: str) -> bool:
        """Remove ``key``; return whether it was present."""
        with self._conn:
            cursor = self._conn.execute("DELETE FROM users WHERE key = ?", (key,))
        return cursor.rowcount > 0

    def close(self) -> None:
        """Close the underlying database."""
        self._conn.close()

    def __enter__(self) -> UserStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()