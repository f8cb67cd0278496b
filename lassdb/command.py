"""Parsing of database commands from command-line arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class CommandKind(Enum):
    """The operations a command can request."""

    PUT = "put"
    GET = "get"
    DELETE = "delete"
    FLUSH = "flush"


@dataclass(frozen=True)
class Command:
    """A parsed command with the key and value it needs."""

    kind: CommandKind
    key: str | None = None
    value: str | None = None

    @classmethod
    def from_args(cls, argv: Sequence[str] | None = None) -> Command | None:
        """Parse arguments (excluding the program name); None if they are invalid."""
        args = list(sys.argv[1:] if argv is None else argv)
        if not args:
            return None
        name, *rest = args
        try:
            kind = CommandKind(name)
        except ValueError:
            return None
        match kind, rest:
            case CommandKind.PUT, [key, value, *_]:
                return cls(kind, key=key, value=value)
            case (CommandKind.GET | CommandKind.DELETE), [key, *_]:
                return cls(kind, key=key)
            case CommandKind.FLUSH, _:
                return cls(kind)
        return None