"""
Configuration for the premium rank store.

The config is a YAML document nested along the dotted keys the store reads:

    database:
      type: sqlite                  # sqlite | mysql | postgresql
      sqlite:
        path: premium.db            # relative to the data directory
      mysql:
        host: localhost
        port: 3306
        database: mcengine
        user: root
        password: ""
        ssl: false
      postgresql:
        host: localhost
        port: 5432
        database: mcengine
        user: postgres
        password: ""
        sslmode: disable

Lookup order:
  - file: $PREMIUM_CONFIG, else <data dir>/config.yml
  - data dir: $PREMIUM_DATA_DIR, else ~/.premium
  - $PREMIUM_DB_TYPE overrides database.type

A missing file means "all defaults". Any key left out falls back to its
default too; only a file that isn't a YAML mapping is an error.
"""

import os
from pathlib import Path

import yaml

from .errors import ConfigError

CONFIG_ENV = "PREMIUM_CONFIG"
DATA_DIR_ENV = "PREMIUM_DATA_DIR"
DB_TYPE_ENV = "PREMIUM_DB_TYPE"

DEFAULT_DATA_DIR = "~/.premium"
CONFIG_FILENAME = "config.yml"

DEFAULTS = {
    "database.type": "sqlite",
    "database.sqlite.path": "premium.db",
    "database.mysql.host": "localhost",
    "database.mysql.port": 3306,
    "database.mysql.database": "mcengine",
    "database.mysql.user": "root",
    "database.mysql.password": "",
    "database.mysql.ssl": False,
    "database.postgresql.host": "localhost",
    "database.postgresql.port": 5432,
    "database.postgresql.database": "mcengine",
    "database.postgresql.user": "postgres",
    "database.postgresql.password": "",
    "database.postgresql.sslmode": "disable",
}

_MISSING = object()


class Config:
    """Read-only view over a parsed config document plus the data directory."""

    def __init__(self, data=None, data_dir=DEFAULT_DATA_DIR):
        self.data = data or {}
        self.data_dir = Path(os.path.expanduser(str(data_dir)))

    def get(self, key: str, default=_MISSING):
        """
        Dotted-path lookup: get("database.mysql.port").

        Falls back to the explicit default, then to DEFAULTS, then None.
        A YAML null (or empty value) counts as absent.
        """
        node = self.data
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                node = _MISSING
                break
            node = node[part]
        if node is not _MISSING:
            return node
        if default is not _MISSING:
            return default
        return DEFAULTS.get(key)

    def get_int(self, key: str) -> int:
        value = self.get(key)
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ConfigError(f"{key} must be an integer, got {value!r}")

    def get_bool(self, key: str) -> bool:
        value = self.get(key)
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes", "on")
        return bool(value)

    # ── Database ──────────────────────────────────────────────

    @property
    def database_type(self) -> str:
        return str(self.get("database.type")).strip().lower()

    def sqlite_path(self) -> Path:
        """database.sqlite.path, resolved against the data directory."""
        path = Path(os.path.expanduser(str(self.get("database.sqlite.path"))))
        if not path.is_absolute():
            path = self.data_dir / path
        return path

    def connector_options(self, backend: str) -> dict:
        """Constructor kwargs for the connector of the given backend."""
        backend = (backend or "").strip().lower()
        if backend == "sqlite":
            return {"db_path": str(self.sqlite_path())}
        if backend == "mysql":
            return {
                "host": self.get("database.mysql.host"),
                "port": self.get_int("database.mysql.port"),
                "database": self.get("database.mysql.database"),
                "user": self.get("database.mysql.user"),
                "password": str(self.get("database.mysql.password")),
                "ssl": self.get_bool("database.mysql.ssl"),
            }
        if backend == "postgresql":
            return {
                "host": self.get("database.postgresql.host"),
                "port": self.get_int("database.postgresql.port"),
                "database": self.get("database.postgresql.database"),
                "user": self.get("database.postgresql.user"),
                "password": str(self.get("database.postgresql.password")),
                "sslmode": self.get("database.postgresql.sslmode"),
            }
        return {}

    def __repr__(self):
        return f"<Config {self.database_type} data_dir={self.data_dir}>"


def default_data_dir(env=None) -> Path:
    env = os.environ if env is None else env
    return Path(os.path.expanduser(env.get(DATA_DIR_ENV) or DEFAULT_DATA_DIR))


def load_config(path=None, *, data_dir=None, env=None) -> Config:
    """
    Read the config document and apply environment overrides.

    Args:
        path:     Explicit config file. Defaults to $PREMIUM_CONFIG or
                  <data dir>/config.yml.
        data_dir: Explicit data directory. Defaults to $PREMIUM_DATA_DIR
                  or ~/.premium.
        env:      Mapping used instead of os.environ (tests).

    Raises:
        ConfigError: the file exists but isn't a YAML mapping.
    """
    env = os.environ if env is None else env
    data_dir = Path(os.path.expanduser(str(data_dir))) if data_dir else default_data_dir(env)
    if path is None:
        path = env.get(CONFIG_ENV) or data_dir / CONFIG_FILENAME
    path = Path(os.path.expanduser(str(path)))

    data = {}
    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must contain a mapping")

    override = (env.get(DB_TYPE_ENV) or "").strip()
    if override:
        database = data.get("database")
        data["database"] = dict(database) if isinstance(database, dict) else {}
        data["database"]["type"] = override

    return Config(data, data_dir=data_dir)
