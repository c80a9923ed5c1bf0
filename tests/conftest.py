import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.exc import OperationalError

from robot_logs.core.config import DatabaseSettings, Settings
from robot_logs.infrastructure.database import Database
from robot_logs.main import create_app


def _make_log(robot="robot-1", generation="gen1", start="2024-01-01T00:00:00Z", end="2024-01-01T00:00:05Z", lat=52.52, lng=13.405):
    return {
        "robot": robot,
        "deviceGeneration": generation,
        "startTime": start,
        "endTime": end,
        "lat": lat,
        "lng": lng,
    }


@pytest.fixture
def make_log():
    return _make_log


@pytest.fixture
def settings(tmp_path):
    return Settings(
        environment="test",
        log_level="DEBUG",
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'logs.db'}", create_tables=True),
    )


@pytest.fixture
def database(settings):
    return Database.from_settings(settings.database)


@pytest.fixture
def app(settings, database):
    return create_app(settings=settings, database=database)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def database_outage(database):
    """Make every INSERT fail as if the database went away mid-request."""

    def fail_inserts(conn, cursor, statement, parameters, context, executemany):
        if statement.lstrip().upper().startswith("INSERT"):
            raise OperationalError(statement, parameters, ConnectionError("database unreachable"))

    sync_engine = database.engine.sync_engine
    event.listen(sync_engine, "before_cursor_execute", fail_inserts)
    yield
    event.remove(sync_engine, "before_cursor_execute", fail_inserts)
