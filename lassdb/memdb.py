"""A process-wide in-memory table of users, with JSON helpers."""

from __future__ import annotations

import threading

from lassdb.schema import SchemaRegistry
from lassdb.user import User

_DB: dict[str, User] = {}
_LOCK = threading.Lock()
_REGISTRY = SchemaRegistry()


def put_user(key: str, user: User) -> None:
    """Store ``user`` under ``key``, replacing any previous value."""
    if not isinstance(user, User):
        raise TypeError(f"expected a User, got {type(user).__name__}")
    with _LOCK:
        _DB[key] = user


def get_user(key: str) -> User | None:
    """Return the user stored under ``key``, or None."""
    with _LOCK:
        return _DB.get(key)


def delete_user(key: str) -> bool:
    """Remove ``key``; return whether it was present."""
    with _LOCK:
        return _DB.pop(key, None) is not None


def put_json(key: str, user_json: str) -> None:
    """Parse a user from JSON and store it under ``key``."""
    put_user(key, User.from_json(user_json))


def get_json(key: str) -> str | None:
    """Return the user under ``key`` as JSON, or None."""
    user = get_user(key)
    return None if user is None else user.to_json()


def get_schema(name: str) -> str | None:
    """Return the description of a registered schema, or None."""
    return _REGISTRY.get_schema(name)