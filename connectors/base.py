"""
Abstract rank-table connector.

Every connector implements the same surface:

    connect()                       → driver connection (or BackendConnectionError)
    table_exists(category)          → bool
    list_categories()               → list[str]
    create_table(category)          → None
    get_rank(player_id, category)   → int   (-1 = no rank)
    upgrade_rank(player_id, category)
    disconnect()
    ping()                          → bool

Connectors own one driver connection and all of the SQL text. Outside of
connect(), nothing here raises: a missing connection or a failing statement
is logged and turned into the "not found" answer (False, [], -1, no-op).

Subclasses supply the dialect — how to open the connection, where the
catalog lives, which column types to use, and whether a single-statement
upsert is available.
"""

import logging
from abc import ABC, abstractmethod

from .errors import BackendConnectionError
from .identifiers import category_of, table_name

log = logging.getLogger(__name__)

NO_RANK = -1


class Connector(ABC):
    """
    One engine, one connection, one dialect.

    Subclasses must implement:
      _open        — return an open DB-API connection (raise on failure)
      _create_sql  — CREATE TABLE IF NOT EXISTS for one rank table
      _exists_sql  — catalog query, one placeholder for the lowercased name
      _list_sql    — catalog query returning candidate table names

    Set atomic_upsert = True and override upsert() where the engine can
    create-or-increment in one statement. Everyone else gets the
    select → update/insert path in upgrade_rank().
    """

    dialect = "base"
    placeholder = "?"
    rank_column = "rank"
    atomic_upsert = False

    def __init__(self):
        self._conn = None

    # ── Required ──────────────────────────────────────────────

    @abstractmethod
    def _open(self):
        """Open and return a driver connection in autocommit mode."""
        ...

    @abstractmethod
    def _create_sql(self, table: str) -> str:
        ...

    @abstractmethod
    def _exists_sql(self) -> str:
        ...

    @abstractmethod
    def _list_sql(self) -> str:
        """
        Table names that might be rank tables, first column only.

        May over-match (LIKE treats '_' as a wildcard); list_categories()
        re-checks the literal prefix.
        """
        ...

    # ── Optional (override if the dialect supports it) ────────

    def upsert(self, table: str) -> str:
        """
        Single-statement create-or-increment, one placeholder for the player.

        Only consulted when atomic_upsert is True.
        """
        raise NotImplementedError(f"{self.dialect} has no atomic upsert")

    def bind_player(self, player_id):
        """Convert a player id into the value bound for the uuid column."""
        return str(player_id)

    # ── Connection ────────────────────────────────────────────

    @property
    def connection(self):
        """The live driver connection, or None."""
        return self._conn

    @property
    def connected(self) -> bool:
        return self._conn is not None

    def connect(self):
        """
        Open the connection if it isn't already open.

        Raises BackendConnectionError when the driver refuses. No retry;
        the connector simply stays disconnected.
        """
        if self._conn is not None:
            return self._conn
        try:
            self._conn = self._open()
        except Exception as e:
            raise BackendConnectionError(
                f"Failed to connect to {self.dialect}: {e}"
            ) from e
        log.info("Connected to %r", self)
        return self._conn

    def disconnect(self):
        """Close the connection. Safe to call any number of times."""
        conn, self._conn = self._conn, None
        if conn is None:
            return
        try:
            conn.close()
            log.info("Disconnected from %r", self)
        except Exception as e:
            log.warning("Error closing %s connection: %s", self.dialect, e)

    def ping(self) -> bool:
        """Round-trip SELECT 1. Never raises."""
        if self._conn is None:
            return False
        try:
            row = self._execute("SELECT 1", fetch="one")
            return bool(row) and int(row[0]) == 1
        except Exception:
            return False

    # ── Plumbing ──────────────────────────────────────────────

    def _execute(self, sql, params=None, fetch=None):
        """
        Run one statement on the shared connection.

        fetch: None → rowcount, "one" → first row, "all" → every row.
        params is only passed through when present so drivers that do
        %-formatting leave literal '%' alone.
        """
        cur = self._conn.cursor()
        try:
            if params:
                cur.execute(sql, params)
            else:
                cur.execute(sql)
            if fetch == "one":
                return cur.fetchone()
            if fetch == "all":
                return cur.fetchall()
            return cur.rowcount
        finally:
            cur.close()

    # ── Interface ─────────────────────────────────────────────

    def table_exists(self, category) -> bool:
        table = table_name(category)
        if self._conn is None:
            log.warning("%s: not connected, cannot look up %s", self.dialect, table)
            return False
        try:
            row = self._execute(self._exists_sql(), (table.lower(),), fetch="one")
        except Exception as e:
            log.warning("%s: table lookup for %s failed: %s", self.dialect, table, e)
            return False
        return row is not None

    def list_categories(self) -> list[str]:
        """Suffixes of every premium_rank_* table, in catalog order."""
        if self._conn is None:
            log.warning("%s: not connected, cannot list rank tables", self.dialect)
            return []
        try:
            rows = self._execute(self._list_sql(), fetch="all")
        except Exception as e:
            log.warning("%s: listing rank tables failed: %s", self.dialect, e)
            return []
        out = []
        for row in rows:
            name = row[0]
            if isinstance(name, bytes):
                name = name.decode()
            category = category_of(name)
            if category:
                out.append(category)
        return out

    def create_table(self, category):
        """Ensure the rank table exists. Failures are logged, not raised."""
        table = table_name(category)
        if self._conn is None:
            log.warning("%s: not connected, cannot create %s", self.dialect, table)
            return
        try:
            self._execute(self._create_sql(table))
        except Exception as e:
            log.error("%s: creating %s failed: %s", self.dialect, table, e)

    def get_rank(self, player_id, category) -> int:
        table = table_name(category)
        if self._conn is None:
            log.warning("%s: not connected, cannot read rank from %s", self.dialect, table)
            return NO_RANK
        sql = (
            f"SELECT {self.rank_column} FROM {table} "
            f"WHERE uuid = {self.placeholder}"
        )
        try:
            row = self._execute(sql, (self.bind_player(player_id),), fetch="one")
        except Exception as e:
            log.warning("%s: reading rank from %s failed: %s", self.dialect, table, e)
            return NO_RANK
        return int(row[0]) if row else NO_RANK

    def upgrade_rank(self, player_id, category):
        """
        Create-or-increment the player's rank.

        With atomic_upsert this is one statement. Otherwise it's a read
        followed by an UPDATE or INSERT, two round trips with nothing
        stopping another writer in between. Callers sharing a connector
        across threads must serialize (RankStore does).
        """
        table = table_name(category)
        if self._conn is None:
            log.warning("%s: not connected, cannot upgrade rank in %s", self.dialect, table)
            return
        try:
            player = self.bind_player(player_id)
            if self.atomic_upsert:
                self._execute(self.upsert(table), (player,))
                return

            ph = self.placeholder
            col = self.rank_column
            row = self._execute(
                f"SELECT {col} FROM {table} WHERE uuid = {ph}", (player,), fetch="one"
            )
            if row:
                self._execute(
                    f"UPDATE {table} SET {col} = {col} + 1 WHERE uuid = {ph}", (player,)
                )
            else:
                self._execute(
                    f"INSERT INTO {table} (uuid, {col}) VALUES ({ph}, 1)", (player,)
                )
        except Exception as e:
            log.error("%s: upgrading rank in %s failed: %s", self.dialect, table, e)

    # ── Repr ──────────────────────────────────────────────────

    def __repr__(self):
        return f"<{self.__class__.__name__}>"
