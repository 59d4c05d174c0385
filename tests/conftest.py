"""
Pytest configuration and fixtures

Tests never talk to a real Redis: an in-memory stand-in is wrapped in the
real CacheClient and injected through create_app().
"""
import pytest
from fastapi.testclient import TestClient
from redis.exceptions import ConnectionError as RedisConnectionError

from app.config import Settings
from app.main import create_app
from app.utils.redis_util import CacheClient


class InMemoryRedis:
    """Implements the handful of redis.asyncio calls CacheClient makes."""

    def __init__(self, reachable: bool = True):
        self.reachable = reachable
        self.store = {}
        self.ttls = {}
        self.get_calls = 0
        self.set_calls = 0
        self.closed = False

    def _check(self):
        if not self.reachable:
            raise RedisConnectionError("Error 111 connecting to localhost:6379. Connection refused.")

    async def ping(self):
        self._check()
        return True

    async def get(self, key):
        self.get_calls += 1
        self._check()
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        self.set_calls += 1
        self._check()
        self.store[key] = value
        self.ttls[key] = ex
        return True

    async def aclose(self):
        self.closed = True


def make_settings(**overrides) -> Settings:
    values = dict(
        CORS_ALLOW_ORIGIN="http://localhost:3000",
        APP_PORT=8000,
        RATE_LIMIT=10,
        TIME_LIMIT=60,
        REDIS_HOST="localhost",
        REDIS_PORT=6379,
        REDIS_PASSWORD="",
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def fake_redis():
    return InMemoryRedis()


@pytest.fixture
def cache(fake_redis):
    return CacheClient(fake_redis)


@pytest.fixture
def app(settings, cache):
    return create_app(settings=settings, cache=cache)


@pytest.fixture
def client(app):
    return TestClient(app)
