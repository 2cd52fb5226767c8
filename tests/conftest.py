"""
Pytest fixtures: an in-memory SQLite engine that understands NOW(), a fake
redis client, and a TestClient wired to a prober built on them.
"""

from __future__ import annotations

import time

import pytest
import redis
from sqlalchemy import create_engine, event

from app.services.prober_service import ConnectivityProber
from tests.fakes import FakeRedis, RefusingEngine


@pytest.fixture
def sqlite_engine():
    engine = create_engine("sqlite://")

    @event.listens_for(engine, "connect")
    def _register_now(dbapi_conn, _record):
        dbapi_conn.create_function("NOW", 0, lambda: time.strftime("%Y-%m-%dT%H:%M:%S"))

    yield engine
    engine.dispose()


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def down_redis():
    return FakeRedis(error=redis.ConnectionError("Error 111 connecting to localhost:6379. Connection refused."))


@pytest.fixture
def healthy_prober(sqlite_engine, fake_redis):
    return ConnectivityProber(sqlite_engine, fake_redis)


@pytest.fixture
def failing_prober(down_redis):
    return ConnectivityProber(RefusingEngine(), down_redis)


def make_client(prober):
    from fastapi.testclient import TestClient

    from app.main import create_app

    return TestClient(create_app(prober=prober))


@pytest.fixture
def client(healthy_prober):
    with make_client(healthy_prober) as c:
        yield c


@pytest.fixture
def failing_client(failing_prober):
    with make_client(failing_prober) as c:
        yield c
