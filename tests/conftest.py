import pytest

from shortenerclient.dao import KeyValueMemoryDAO
from shortenerclient.dao.exceptions import DataStoreError
from shortenerclient.session import SessionManager


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    """Keep tests independent from the developer's environment."""
    for name in ('APP_ENV', 'APP_NAME', 'SHORTENER_LOCAL', 'SHORTENER_API_URL', 'LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def store():
    """Provide an empty in-memory key-value store."""
    return KeyValueMemoryDAO()


@pytest.fixture
def session(store):
    """Provide an initialized, unauthenticated session manager."""
    _session = SessionManager(store)
    _session.initialize()
    return _session


class DeleteFailingMemoryDAO(KeyValueMemoryDAO):
    """In-memory store whose deletes fail as if the backing server went away."""

    def delete(self, key, **kwargs):
        raise DataStoreError("Can't connect to Redis at redis.test:6379/0.")


@pytest.fixture
def delete_failing_store():
    """Provide a store that reads and writes but cannot delete."""
    return DeleteFailingMemoryDAO()
