import logging
from typing import Optional

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from timestack.config import Settings, settings

logger = logging.getLogger(__name__)

SCHEMAS = ("core", "discovery_source")


def _attach_sqlite_schemas(engine: Engine, database: Optional[str]) -> None:
    # SQLite has no schemas; each one is an attached database on every connection
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        for schema in SCHEMAS:
            target = ":memory:" if not database or database == ":memory:" else f"{database}.{schema}"
            cursor.execute(f"ATTACH DATABASE '{target}' AS {schema}")
        cursor.close()


def create_db_engine(config: Settings = settings, echo: bool = False) -> Engine:
    """Create the engine. Schema changes only ever happen through migrations."""
    url = config.sqlalchemy_url

    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        database = url.split("///", 1)[1] if "///" in url else None
        if not database or database == ":memory:":
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=echo, **kwargs)
        _attach_sqlite_schemas(engine, database)
        return engine

    search_path = ",".join(config.search_path)
    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        connect_args={"options": f"-c search_path={search_path}"},
    )


engine = create_db_engine(settings)


def check_connection(target: Engine = None) -> None:
    """Ping the database; raises if it is unreachable."""
    target = target or engine
    with target.connect() as connection:
        connection.execute(text("SELECT 1"))
    logger.info("Database reachable at %s", target.url.render_as_string(hide_password=True))


def get_db(request: Request):
    with Session(request.app.state.engine) as session:
        yield session
