"""
RankStore — the one object the rest of the process talks to.

Picks a connector once, at construction, from database.type and holds it
(and its single connection) until disconnect(). Every call is forwarded to
that connector under one lock:

    store = RankStore.from_config(load_config())
    store.create_table("vip")
    store.upgrade_rank(player_id, "vip")
    store.get_rank(player_id, "vip")          # → 1
    store.list_available_rank_types()         # → ["vip"]

The lock matters for SQLite and MySQL, whose upgrade_rank() is a read
followed by a write. Under the lock two upgrades for the same player
can't interleave, so every backend behaves as if the upgrade were atomic
within this process. Other processes writing the same tables are not
covered.

Construction fails loudly on an unknown backend. A backend that won't
connect is logged and left disconnected: reads answer "not found",
writes do nothing.
"""

import logging
import threading

from connectors import NO_RANK, backend_class

from .errors import BackendConnectionError, ConfigError

__all__ = ["RankStore", "NO_RANK"]

log = logging.getLogger(__name__)


class RankStore:
    """Facade over the selected connector. Construct one per process and pass it around."""

    def __init__(self, backend: str, config):
        """
        Args:
            backend: sqlite | mysql | postgresql (any case).
            config:  premium.config.Config supplying connection settings.

        Raises:
            UnsupportedBackendError: before anything is opened.
            ConfigError: the connector rejects the configured settings.
        """
        cls = backend_class(backend)
        self.backend = cls.dialect
        self._lock = threading.RLock()
        try:
            self._db = cls(**config.connector_options(self.backend))
        except ConfigError:
            raise
        except ValueError as e:
            raise ConfigError(f"{self.backend}: {e}") from e
        log.info("Premium rank store using %s backend", self.backend)
        self.connect()

    @classmethod
    def from_config(cls, config):
        return cls(config.database_type, config)

    # ── Connection ────────────────────────────────────────────

    def connect(self) -> bool:
        """Open the connection if needed. Returns whether the store is connected."""
        with self._lock:
            try:
                self._db.connect()
            except BackendConnectionError as e:
                log.error("%s", e)
                return False
            return True

    def disconnect(self):
        with self._lock:
            self._db.disconnect()

    @property
    def connected(self) -> bool:
        return self._db.connected

    @property
    def connection(self):
        """The raw driver connection. Don't use it without holding the store's lock."""
        return self._db.connection

    @property
    def connector(self):
        return self._db

    def ping(self) -> bool:
        with self._lock:
            return self._db.ping()

    # ── Rank tables ───────────────────────────────────────────

    def table_exists(self, category) -> bool:
        with self._lock:
            return self._db.table_exists(category)

    def rank_table_exists(self, category) -> bool:
        return self.table_exists(category)

    def list_categories(self) -> list[str]:
        with self._lock:
            return self._db.list_categories()

    def list_available_rank_types(self) -> list[str]:
        return self.list_categories()

    def create_table(self, category):
        with self._lock:
            self._db.create_table(category)

    # ── Ranks ─────────────────────────────────────────────────

    def get_rank(self, player_id, category) -> int:
        """Current rank, or NO_RANK (-1) when there's no row or the lookup failed."""
        with self._lock:
            return self._db.get_rank(player_id, category)

    def upgrade_rank(self, player_id, category):
        with self._lock:
            self._db.upgrade_rank(player_id, category)

    def upgrade_and_get(self, player_id, category) -> int:
        """Upgrade, then read back, without another caller slipping in between."""
        with self._lock:
            self._db.upgrade_rank(player_id, category)
            return self._db.get_rank(player_id, category)

    # ── Context manager ───────────────────────────────────────

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.disconnect()
        return False

    def __repr__(self):
        state = "connected" if self.connected else "disconnected"
        return f"<RankStore {self._db!r} {state}>"

