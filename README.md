# lassdb

A small, embeddable key-value database for user records. Records follow a
versioned schema (`UserV1`, `UserV2`), and older records can be migrated to
the current version. It needs nothing beyond the Python 3.11+ standard
library.

## Installation

```
pip install .
```

Install with the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Interactive shell

```
lassdb
```

This opens a persistent store in the `db` directory of the current working
directory (created if missing) and shows a prompt:

```
Welcome to LassDB (Interactive Mode)
Commands: put <key> <email> | get <key> | delete <key> | exit
lassdb> put alice alice@example.com
Inserted!
lassdb> get alice
Fetched: User(record=UserV2(id=1, name='alice', email='alice@example.com'))
lassdb> delete alice
Deleted: true
lassdb> get alice
Key not found
lassdb> exit
Goodbye!
```

- `put <key> <email>` stores a version 2 user with id `1` whose name is the key.
- `get <key>` prints the stored user, or `Key not found`.
- `delete <key>` prints `Deleted: true` or `Deleted: false`.
- `exit`, or the end of input, leaves the shell.

Any other input prints the usage line
`Usage: put <key> <email> | get <key> | delete <key> | exit`.

Options:

- `--db DIR` uses another database directory (default `db`).
- `--version` prints the version and exits.

Inserts are also logged at INFO level through the `lassdb` logger.

## Library use

### Schemas and users (`lassdb.schema`, `lassdb.user`)

`UserV1` holds `id` and `name`; `UserV2` adds `email`. Both are frozen
dataclasses; `id` must be an integer from 0 to 2**32 - 1 and the other fields
strings, or `TypeError` / `ValueError` is raised.

A `User` wraps one of them. `User.migrate()` turns a version 1 user into a
version 2 user with the e-mail address `unknown@example.com` (version 2 users
are returned unchanged), and `User.current_version()` returns `"1"` or `"2"`.

Users serialise to and from JSON with `User.to_json()` / `User.from_json()`
and to and from plain dictionaries with `User.to_dict()` / `User.from_dict()`.
The form is tagged with the version:

```json
{"version":"V2","data":{"id":1,"name":"alice","email":"alice@example.com"}}
```

Malformed input (unknown version, missing or mistyped fields) raises
`ValueError`.

`SchemaRegistry` describes the known schemas: `get_schema("UserV2")` returns
`"{ id: u32, name: String, email: String }"`, `None` for an unknown name, and
`all()` returns a read-only mapping of every entry.

### Persistent store (`lassdb.store`)

`UserStore(path)` keeps users as JSON in an SQLite file (`users.sqlite3`)
inside the directory `path`, creating the directory if needed. It offers
`put(key, user)` (committed immediately), `get(key)` (returning `None` for a
missing key), `delete(key)` (returning whether a record was removed) and
`close()`. It is also a context manager:

```python
from lassdb.schema import UserV1
from lassdb.store import UserStore
from lassdb.user import User

with UserStore("db") as store:
    store.put("bob", User(UserV1(id=7, name="bob")))
    print(store.get("bob").migrate())
```

### In-process store (`lassdb.memdb`)

A process-wide, lock-protected in-memory table: `put_user`, `get_user` and
`delete_user` work on `User` objects, while `put_json` and `get_json`
exchange users as JSON text. `get_schema(name)` looks a schema up in the
registry.

### Storage backends (`lassdb.backends`)

Backends implement `StorageBackend`, with `load()` returning a dict of
strings to strings and `save(store)` persisting it:

- `FileStorage(path)` keeps the dict as a JSON file and writes it atomically
  through a `.tmp` file beside it; a missing, unreadable or malformed file
  loads as an empty dict.
- `InMemoryStorage(initial=None)` returns a copy of its initial dict (or an
  empty one) and never persists.
- `HybridStorage(path)` uses `FileStorage` when the path already exists and
  `InMemoryStorage` otherwise; the chosen backend is its `backend` attribute.

### Configuration and commands (`lassdb.config`, `lassdb.command`)

`Config` holds `autosave`, `flush_on_exit` and `snapshot_path`;
`Config.from_dict(data)` checks every field and `load_config(path)` reads it
from a TOML file (default `lassdb.toml`). A missing or mistyped field, or
invalid TOML, raises `ConfigError`.

`Command.from_args(argv)` parses `put <key> <value>`, `get <key>`,
`delete <key>` and `flush` into a `Command` with a `CommandKind`, or returns
`None` when the arguments do not form a command. Without `argv` it reads
`sys.argv[1:]`.

## What it does not do

The storage backends, `Config` and `Command` are standalone building blocks:
nothing in the package combines them into a string key-value database, and
no command reads `lassdb.toml` or acts on a parsed `Command`. The only
command is the interactive `lassdb` shell over `UserStore`.