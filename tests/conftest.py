# tests/conftest.py

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from dailytasks.core.config import Settings
from dailytasks.db.base import Base
from dailytasks.db.session import make_engine, make_session_factory
from dailytasks.db.store import LogStore, TaskStore
from dailytasks.main import create_app


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test SQLite file, with the daily triggers off."""
    return Settings(
        DATABASE_PATH=str(tmp_path / "tasks.db"),
        SCHEDULER_ENABLED=False,
    )


@pytest.fixture()
def session_factory(settings: Settings):
    engine = make_engine(settings.SQLALCHEMY_DATABASE_URI)
    Base.metadata.create_all(bind=engine)
    yield make_session_factory(engine)
    engine.dispose()


@pytest.fixture()
def task_store(session_factory) -> TaskStore:
    return TaskStore(session_factory)


@pytest.fixture()
def log_store(session_factory) -> LogStore:
    return LogStore(session_factory)


@pytest.fixture()
def client(settings: Settings):
    # The context manager runs startup, which creates the tables
    with TestClient(create_app(settings)) as c:
        yield c
