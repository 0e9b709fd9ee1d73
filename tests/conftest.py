import pytest
from alembic import command
from fastapi.testclient import TestClient
from sqlmodel import Session

from timestack.config import Settings
from timestack.database import create_db_engine
from timestack.migrations import alembic_config


@pytest.fixture
def bare_engine():
    """In-memory SQLite with the schemas attached but no tables."""
    engine = create_db_engine(Settings(database_url="sqlite://"))
    yield engine
    engine.dispose()


@pytest.fixture
def alembic_cfg(bare_engine):
    return alembic_config(bare_engine)


@pytest.fixture
def engine(bare_engine, alembic_cfg):
    command.upgrade(alembic_cfg, "head")
    return bare_engine


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine, monkeypatch):
    from timestack.main import app

    monkeypatch.setattr(app.state, "engine", engine)
    return TestClient(app)
