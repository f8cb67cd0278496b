"""Interactive shell for a persistent user store."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from lassdb.schema import UserV2
from lassdb.store import UserStore
from lassdb.user import User

log = logging.getLogger("lassdb")

USAGE = "Usage: put <key> <email> | get <key> | delete <key> | exit"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lassdb", description="Embedded user database")
    parser.add_argument("--version", action="version", version="%(prog)s 0.1")
    parser.add_argument("--db", default="db", help="database directory (default: db)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive shell until 'exit' or end of input."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    with UserStore(args.db) as db:
        print("Welcome to LassDB (Interactive Mode)")
        print("Commands: put <key> <email> | get <key> | delete <key> | exit")
        while True:
            print("lassdb> ", end="", flush=True)
            line = sys.stdin.readline()
            if not line:
                print()
                break
            match line.split():
                case ["put", key, email]:
                    db.put(key, User(UserV2(id=1, name=key, email=email)))
                    log.info("Inserted key: %s", key)
                    print("Inserted!")
                case ["get", key]:
                    user = db.get(key)
                    print(f"Fetched: {user!r}" if user is not None else "Key not found")
                case ["delete", key]:
                    print(f"Deleted: {str(db.delete(key)).lower()}")
                case ["exit"]:
                    print("Goodbye!")
                    break
                case _:
                    print(USAGE)
    return 0


if __name__ == "__main__":
    sys.exit(main())