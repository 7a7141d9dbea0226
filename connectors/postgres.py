"""
PostgreSQL connector — rank tables in the current schema.

Driver: psycopg2. The connection runs in autocommit mode so a failed
statement can't leave the shared connection stuck in an aborted
transaction.

Dialect notes:
  - Catalog is information_schema.tables, scoped with
    table_schema = current_schema().
  - uuid is a native UUID column. Player ids are parsed with uuid.UUID
    before binding; a malformed id fails the call (→ -1 / no-op).
  - The only engine here that upgrades in one statement:
      INSERT ... VALUES (id, 1) ON CONFLICT (uuid) DO UPDATE SET rank = rank + 1
"""

import uuid

import psycopg2
import psycopg2.extras

from .base import Connector

psycopg2.extras.register_uuid()


class PostgresConnector(Connector):
    """PostgreSQL via psycopg2."""

    dialect = "postgresql"
    placeholder = "%s"
    atomic_upsert = True

    def __init__(self, *, database="mcengine", host="localhost", port=5432,
                 user="postgres", password="", sslmode="disable"):
        super().__init__()
        if not database:
            raise ValueError("PostgresConnector requires 'database'")
        self.database = database
        self.host = host
        self.port = int(port)
        self.user = user
        self.password = password or ""
        self.sslmode = sslmode or "disable"

    def _open(self):
        conn = psycopg2.connect(
            host=self.host, port=self.port,
            user=self.user, password=self.password,
            dbname=self.database, sslmode=self.sslmode,
        )
        conn.autocommit = True
        return conn

    # ── Dialect overrides ─────────────────────────────────────

    def bind_player(self, player_id):
        """Native UUID binding. Raises ValueError on a malformed id."""
        if isinstance(player_id, uuid.UUID):
            return player_id
        return uuid.UUID(str(player_id))

    def _create_sql(self, table):
        return (
            f"CREATE TABLE IF NOT EXISTS {table} ("
            f" uuid UUID PRIMARY KEY,"
            f" rank INTEGER NOT NULL"
            f")"
        )

    def _exists_sql(self):
        return (
            "SELECT 1 FROM information_schema.tables "
            "WHERE table_schema = current_schema() AND LOWER(table_name) = %s"
        )

    def _list_sql(self):
        return (
            "SELECT table_name FROM information_schema.tables "
            "WHERE table_schema = current_schema() AND LOWER(table_name) LIKE 'premium_rank_%'"
        )

    def upsert(self, table):
        """PostgreSQL ON CONFLICT create-or-increment."""
        return (
            f"INSERT INTO {table} (uuid, rank) VALUES (%s, 1) "
            f"ON CONFLICT (uuid) DO UPDATE SET rank = {table}.rank + 1"
        )

    def __repr__(self):
        return f"<PostgresConnector {self.user}@{self.host}:{self.port}/{self.database}>"
