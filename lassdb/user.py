"""A user record tagged with its schema version."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any

from lassdb.schema import UserV1, UserV2

DEFAULT_EMAIL = "unknown@example.com"

_TAGS: dict[str, type[UserV1] | type[UserV2]] = {"V1": UserV1, "V2": UserV2}


@dataclass(frozen=True)
class User:
    """A user stored under one of the known schema versions."""

    record: UserV1 | UserV2

    def __post_init__(self) -> None:
        if not isinstance(self.record, (UserV1, UserV2)):
            raise TypeError(f"unsupported user record: {self.record!r}")

    def migrate(self) -> User:
        """Return this user upgraded to the latest schema version."""
        if isinstance(self.record, UserV1):
            return User(
                UserV2(id=self.record.id, name=self.record.name, email=DEFAULT_EMAIL)
            )
        return self

    def current_version(self) -> str:
        """Return the schema version of this user as a string."""
        return "1" if isinstance(self.record, UserV1) else "2"

    def to_dict(self) -> dict[str, Any]:
        """Return the tagged representation of this user."""
        tag = "V1" if isinstance(self.record, UserV1) else "V2"
        return {"version": tag, "data": asdict(self.record)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> User:
        """Build a user from its tagged representation."""
        if not isinstance(data, Mapping):
            raise ValueError("user must be a mapping")
        try:
            tag = data["version"]
            payload = data["data"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None
        record_type = _TAGS.get(tag) if isinstance(tag, str) else None
        if record_type is None:
            raise ValueError(f"unknown user version {tag!r}")
        if not isinstance(payload, Mapping):
            raise ValueError("user data must be a mapping")
        kwargs = {}
        for field in fields(record_type):
            if field.name not in payload:
                raise ValueError(f"missing field {field.name!r}")
            kwargs[field.name] = payload[field.name]
        try:
            return cls(record_type(**kwargs))
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    def to_json(self) -> str:
        """Serialise this user to compact JSON."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str | bytes) -> User:
        """Parse a user from JSON text."""
        return cls.from_dict(json.loads(text))