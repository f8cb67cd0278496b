"""Versioned user records and a registry describing their shapes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

_U32_MAX = 2**32 - 1


def _check_id(value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"id must be an integer, got {type(value).__name__}")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"id {value} does not fit in an unsigned 32-bit integer")


def _check_str(field: str, value: object) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a string, got {type(value).__name__}")


@dataclass(frozen=True)
class UserV1:
    """First version of the user record: an id and a name."""

    id: int
    name: str

    def __post_init__(self) -> None:
        _check_id(self.id)
        _check_str("name", self.name)


@dataclass(frozen=True)
class UserV2:
    """Second version of the user record, adding an e-mail address."""

    id: int
    name: str
    email: str

    def __post_init__(self) -> None:
        _check_id(self.id)
        _check_str("name", self.name)
        _check_str("email", self.email)


class SchemaRegistry:
    """Maps schema names to a textual description of their fields."""

    def __init__(self) -> None:
        self._schemas: dict[str, str] = {
            "UserV1": "{ id: u32, name: String }",
            "UserV2": "{ id: u32, name: String, email: String }",
        }

    def get_schema(self, name: str) -> str | None:
        """Return the description of the named schema, or None if unknown."""
        return self._schemas.get(name)

    def all(self) -> Mapping[str, str]:
        """Return a read-only view of every registered schema."""
        return MappingProxyType(self._schemas)

    def __repr__(self) -> str:
        return f"SchemaRegistry(schemas={self._schemas!r})"