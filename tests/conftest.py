"""
Shared fixtures: a SQLite-backed store in a temp data dir, permission-scoped
actors, and a stand-in DB-API connection for the MySQL/PostgreSQL tests.
"""

import uuid
from dataclasses import dataclass, field
from typing import Optional

import pytest

from premium.config import Config
from premium.permissions import ALL_PERMISSIONS
from premium.store import RankStore

STEVE_ID = "8667ba71-b85a-4004-af54-457a9734eed7"
ALEX_ID = "ec561538-f3fd-461d-aff5-086b22154bce"


# ── Actors ────────────────────────────────────────────────────


@dataclass
class FakeActor:
    name: str
    player_id: Optional[str] = None
    permissions: set = field(default_factory=set)

    def has_permission(self, node):
        return node in self.permissions


class FakePlayers:
    def __init__(self, *players):
        self._players = {p.name: p for p in players}

    def find_online(self, name):
        return self._players.get(name)

    def online_names(self):
        return list(self._players)


def player(name="Steve", player_id=STEVE_ID, perms=ALL_PERMISSIONS):
    return FakeActor(name=name, player_id=player_id, permissions=set(perms))


def console(perms=ALL_PERMISSIONS):
    return FakeActor(name="CONSOLE", permissions=set(perms))


# ── SQLite store ──────────────────────────────────────────────


@pytest.fixture
def config(tmp_path):
    return Config(
        {"database": {"type": "sqlite", "sqlite": {"path": "premium.db"}}},
        data_dir=tmp_path,
    )


@pytest.fixture
def store(config):
    s = RankStore.from_config(config)
    yield s
    s.disconnect()


# ── Stand-in driver connection ────────────────────────────────


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.rowcount = -1
        self._rows = []

    def execute(self, sql, params=None):
        self.conn.executed.append((sql, params))
        if self.conn.error is not None:
            raise self.conn.error
        self._rows = list(self.conn.respond(sql, params))
        self.rowcount = len(self._rows)

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        pass


class FakeConnection:
    """
    Records every statement. `respond(sql, params)` returns the rows for a
    statement; set `error` to make every execute() raise it.
    """

    def __init__(self, respond=None):
        self.executed = []
        self.respond = respond or (lambda sql, params: [])
        self.error = None
        self.closed = False
        self.autocommit = False

    def cursor(self):
        return FakeCursor(self)

    def close(self):
        self.closed = True

    def statements(self):
        return [sql for sql, _ in self.executed]


@pytest.fixture
def fake_conn():
    return FakeConnection()


@pytest.fixture
def new_uuid():
    return lambda: str(uuid.uuid4())
