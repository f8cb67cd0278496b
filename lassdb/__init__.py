"""Embeddable key-value database for versioned user records.

Modules: schema, user, store, memdb, backends, config, command and cli.
"""

__version__ = "0.1.0"