import sqlalchemy as sa

from timestack import database
from timestack.config import Settings
from timestack.database import check_connection


def test_sqlite_engine_attaches_schemas(bare_engine):
    with bare_engine.connect() as connection:
        names = {row[1] for row in connection.exec_driver_sql("PRAGMA database_list")}
        foreign_keys = connection.exec_driver_sql("PRAGMA foreign_keys").scalar()

    assert {"main", "core", "discovery_source"} <= names
    assert foreign_keys == 1


def test_postgresql_engine_sets_search_path(monkeypatch):
    captured = {}

    def fake_create_engine(url, **kwargs):
        captured["url"] = url
        captured.update(kwargs)
        return "engine"

    monkeypatch.setattr(database, "create_engine", fake_create_engine)

    engine = database.create_db_engine(Settings(postgres_host="db", postgres_password="secret"))

    assert engine == "engine"
    assert captured["url"] == "postgresql+psycopg2://postgres:secret@db:5432/postgres"
    assert captured["pool_pre_ping"] is True
    assert captured["connect_args"] == {"options": "-c search_path=public,core,discovery_source"}


def test_database_url_overrides_postgres_settings(monkeypatch):
    captured = {}
    monkeypatch.setattr(database, "create_engine", lambda url, **kwargs: captured.setdefault("url", url))

    database.create_db_engine(Settings(database_url="postgresql+psycopg2://app@replica/timestack"))

    assert captured["url"] == "postgresql+psycopg2://app@replica/timestack"


def test_check_connection(bare_engine):
    check_connection(bare_engine)


def test_no_tables_without_migrations(bare_engine):
    # importing the models never creates tables
    import timestack.models  # noqa: F401

    assert sa.inspect(bare_engine).get_table_names(schema="core") == []
