"""
MySQL / MariaDB connector — rank tables in the current database.

Driver: PyMySQL (pure Python).

Dialect notes:
  - Catalog is information_schema.tables, scoped with table_schema = DATABASE().
  - `rank` is a reserved word since MySQL 8.0 and is always backticked.
  - uuid is VARCHAR(36).
  - upgrade_rank() uses the base select → update/insert path.
"""

import pymysql

from .base import Connector


class MySQLConnector(Connector):
    """MySQL/MariaDB via PyMySQL."""

    dialect = "mysql"
    placeholder = "%s"
    rank_column = "`rank`"

    def __init__(self, *, database="mcengine", host="localhost", port=3306,
                 user="root", password="", ssl=False):
        super().__init__()
        if not database:
            raise ValueError("MySQLConnector requires 'database'")
        if not user:
            raise ValueError("MySQLConnector requires 'user'")
        self.database = database
        self.host = host
        self.port = int(port)
        self.user = user
        self.password = password or ""
        self.ssl = bool(ssl)

    def _open(self):
        kwargs = dict(
            host=self.host, port=self.port,
            user=self.user, password=self.password,
            database=self.database,
            autocommit=True,
        )
        if self.ssl:
            # Encrypted, unverified — same as useSSL=true without a CA.
            kwargs["ssl"] = {"check_hostname": False}
        return pymysql.connect(**kwargs)

    # ── Dialect overrides ─────────────────────────────────────

    def _create_sql(self, table):
        return (
            f"CREATE TABLE IF NOT EXISTS {table} ("
            f" uuid VARCHAR(36) NOT NULL PRIMARY KEY,"
            f" `rank` INT NOT NULL"
            f")"
        )

    def _exists_sql(self):
        return (
            "SELECT 1 FROM information_schema.tables "
            "WHERE table_schema = DATABASE() AND LOWER(table_name) = %s"
        )

    def _list_sql(self):
        return (
            "SELECT table_name FROM information_schema.tables "
            "WHERE table_schema = DATABASE() AND LOWER(table_name) LIKE 'premium_rank_%'"
        )

    def __repr__(self):
        return f"<MySQLConnector {self.user}@{self.host}:{self.port}/{self.database}>"
