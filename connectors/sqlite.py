"""
SQLite connector — embedded, single-file rank tables.

Python stdlib only (sqlite3). The database is a file path; its parent
directory is created on connect.

Dialect notes:
  - Catalog is sqlite_master (one file = one schema, nothing to qualify).
  - uuid is stored as TEXT.
  - No atomic upsert here: upgrade_rank() takes the select → update/insert
    path from the base class.
"""

import os
import sqlite3

from .base import Connector


class SQLiteConnector(Connector):
    """SQLite via the sqlite3 module."""

    dialect = "sqlite"
    placeholder = "?"

    def __init__(self, *, db_path):
        super().__init__()
        if not db_path:
            raise ValueError("SQLiteConnector requires 'db_path'")
        self.db_path = os.path.expanduser(str(db_path))

    def _open(self):
        parent = os.path.dirname(os.path.abspath(self.db_path))
        os.makedirs(parent, exist_ok=True)
        # isolation_level=None → autocommit. check_same_thread=False because
        # the store hands this one connection to whichever thread holds its lock.
        return sqlite3.connect(
            self.db_path, isolation_level=None, check_same_thread=False
        )

    # ── Dialect overrides ─────────────────────────────────────

    def _create_sql(self, table):
        return (
            f"CREATE TABLE IF NOT EXISTS {table} ("
            f" uuid TEXT NOT NULL PRIMARY KEY,"
            f" rank INTEGER NOT NULL"
            f")"
        )

    def _exists_sql(self):
        return "SELECT 1 FROM sqlite_master WHERE type = 'table' AND LOWER(name) = ?"

    def _list_sql(self):
        # SQLite LIKE is already case-insensitive for ASCII.
        return "SELECT name FROM sqlite_master WHERE type = 'table' AND name LIKE 'premium_rank_%'"

    def __repr__(self):
        return f"<SQLiteConnector {self.db_path}>"
