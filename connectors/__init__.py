"""
Premium rank connectors — one contract, three engines.

Usage:

    from connectors import connect

    db = connect("sqlite", db_path="/srv/premium/premium.db")
    db = connect("mysql", host="db", database="mcengine", user="root")
    db = connect("postgresql", host="db", database="mcengine", user="postgres")

    db.connect()                  # raises BackendConnectionError on failure
    db.create_table("vip")
    db.upgrade_rank(player_id, "vip")
    db.get_rank(player_id, "vip")  # → 1
    db.list_categories()           # → ["vip"]
    db.disconnect()

Connectors are plumbing (connection + SQL + dialect). Policy — which
engine, when to connect, serializing callers — lives in premium.store.
"""

from .base import NO_RANK, Connector
from .errors import BackendConnectionError, ConnectorError, UnsupportedBackendError
from .identifiers import TABLE_PREFIX, sanitize, table_name
from .mysql import MySQLConnector
from .postgres import PostgresConnector
from .sqlite import SQLiteConnector

__all__ = [
    "connect",
    "backend_class",
    "BACKENDS",
    "Connector",
    "SQLiteConnector",
    "MySQLConnector",
    "PostgresConnector",
    "ConnectorError",
    "BackendConnectionError",
    "UnsupportedBackendError",
    "NO_RANK",
    "TABLE_PREFIX",
    "sanitize",
    "table_name",
]

# ── database.type → connector mapping ─────────────────────────

BACKENDS = {
    "sqlite": SQLiteConnector,
    "mysql": MySQLConnector,
    "postgresql": PostgresConnector,
}


def backend_class(backend: str) -> type[Connector]:
    """Look up a connector class by type name (case-insensitive)."""
    key = (backend or "").strip().lower()
    cls = BACKENDS.get(key)
    if cls is None:
        raise UnsupportedBackendError(
            f"Unsupported database type '{backend}'. "
            f"Supported: {', '.join(sorted(BACKENDS))}"
        )
    return cls


def connect(backend: str, **options) -> Connector:
    """
    Build (but don't open) a connector.

    Args:
        backend:   sqlite | mysql | postgresql, any case.
        **options: Constructor kwargs for that connector
                   (db_path for sqlite; host/port/database/user/password
                   plus ssl or sslmode for the network engines).

    Raises:
        UnsupportedBackendError: backend isn't one of the three.
    """
    return backend_class(backend)(**options)
