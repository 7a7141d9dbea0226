import uuid

import psycopg2
import pytest

import connectors.postgres
from connectors import NO_RANK, BackendConnectionError, PostgresConnector

from conftest import STEVE_ID, FakeConnection


@pytest.fixture
def opened(monkeypatch):
    conn = FakeConnection()
    calls = []

    def fake_connect(**kwargs):
        calls.append(kwargs)
        return conn

    monkeypatch.setattr(connectors.postgres.psycopg2, "connect", fake_connect)
    db = PostgresConnector(host="pg.local", port=5433, database="mcengine",
                           user="postgres", password="pw", sslmode="require")
    db.connect()
    return db, conn, calls


def test_connect_arguments_and_autocommit(opened):
    db, conn, calls = opened
    assert calls == [{
        "host": "pg.local", "port": 5433,
        "user": "postgres", "password": "pw",
        "dbname": "mcengine", "sslmode": "require",
    }]
    assert conn.autocommit is True


def test_default_sslmode_is_disable():
    assert PostgresConnector().sslmode == "disable"
    assert PostgresConnector(sslmode=None).sslmode == "disable"


def test_connect_failure(monkeypatch):
    def refuse(**kwargs):
        raise psycopg2.OperationalError("connection refused")

    monkeypatch.setattr(connectors.postgres.psycopg2, "connect", refuse)
    db = PostgresConnector()
    with pytest.raises(BackendConnectionError, match="postgresql"):
        db.connect()
    assert db.connection is None


def test_table_exists_queries_current_schema(opened):
    db, conn, _ = opened
    conn.respond = lambda sql, params: [(1,)]
    assert db.table_exists("VVIP")
    sql, params = conn.executed[-1]
    assert "table_schema = current_schema()" in sql
    assert params == ("premium_rank_vvip",)


def test_table_exists_false_when_absent(opened):
    db, conn, _ = opened
    assert db.table_exists("vvip") is False


def test_list_categories(opened):
    db, conn, _ = opened
    conn.respond = lambda sql, params: [("premium_rank_vip",), ("premium_rank_vvip",), ("accounts",)]
    assert db.list_categories() == ["vip", "vvip"]


def test_create_table_uses_native_uuid(opened):
    db, conn, _ = opened
    db.create_table("vip")
    sql = conn.statements()[-1]
    assert "uuid UUID PRIMARY KEY" in sql
    assert "rank INTEGER NOT NULL" in sql


def test_get_rank_binds_uuid(opened):
    db, conn, _ = opened
    conn.respond = lambda sql, params: [(7,)]
    assert db.get_rank(STEVE_ID, "vip") == 7
    _, params = conn.executed[-1]
    assert params == (uuid.UUID(STEVE_ID),)


def test_get_rank_malformed_player_id(opened):
    db, conn, _ = opened
    conn.respond = lambda sql, params: [(7,)]
    assert db.get_rank("not-a-uuid", "vip") == NO_RANK
    assert conn.executed == []


def test_upgrade_is_a_single_upsert(opened):
    db, conn, _ = opened
    db.upgrade_rank(STEVE_ID, "vip")
    assert len(conn.executed) == 1
    sql, params = conn.executed[0]
    assert sql == (
        "INSERT INTO premium_rank_vip (uuid, rank) VALUES (%s, 1) "
        "ON CONFLICT (uuid) DO UPDATE SET rank = premium_rank_vip.rank + 1"
    )
    assert params == (uuid.UUID(STEVE_ID),)


def test_upgrade_malformed_player_id_is_noop(opened, caplog):
    db, conn, _ = opened
    db.upgrade_rank("nope", "vip")
    assert conn.executed == []
    assert "upgrading rank in premium_rank_vip failed" in caplog.text


def test_upgrade_accepts_uuid_objects(opened):
    db, conn, _ = opened
    pid = uuid.UUID(STEVE_ID)
    db.upgrade_rank(pid, "vip")
    assert conn.executed[0][1] == (pid,)


def test_upgrade_error_is_swallowed(opened):
    db, conn, _ = opened
    conn.error = psycopg2.ProgrammingError("relation \"premium_rank_vip\" does not exist")
    db.upgrade_rank(STEVE_ID, "vip")
    assert len(conn.executed) == 1
