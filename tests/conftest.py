from datetime import date

import pytest
from sqlmodel import SQLModel, create_engine
from sqlmodel.pool import StaticPool

from katalog.application.catalog_store import CatalogStore
from katalog.application.form_session import FormSession
from katalog.application.notifications import NotificationCenter
from katalog.domain.entities import EXTENDED_POLICY, SIMPLE_POLICY
from katalog.infrastructure.storage.gateway import PersistenceGateway
from katalog.infrastructure.storage.key_value import SqlKeyValueStore
from katalog.infrastructure.storage.seed import seed_catalog
from katalog.presentation.controller import CatalogController

TODAY = date(2025, 6, 15)


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class FlakyStore:
    """In-memory key-value store whose writes fail a set number of times."""

    def __init__(self, failures: int = 0, initial: dict[str, str] | None = None):
        self.failures = failures
        self.data = dict(initial or {})
        self.put_calls = 0

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def put(self, key: str, value: str) -> None:
        self.put_calls += 1
        if self.failures > 0:
            self.failures -= 1
            raise OSError("storage unavailable")
        self.data[key] = value


@pytest.fixture(name="engine")
def engine_fixture():
    # In-memory SQLite shared across sessions
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="kv_store")
def kv_store_fixture(engine):
    return SqlKeyValueStore(engine)


@pytest.fixture(name="gateway")
def gateway_fixture(kv_store):
    return PersistenceGateway(kv_store, default=seed_catalog(SIMPLE_POLICY))


@pytest.fixture(name="store")
def store_fixture(gateway):
    return CatalogStore(gateway)


@pytest.fixture(name="clock")
def clock_fixture():
    return FakeClock()


@pytest.fixture(name="notifications")
def notifications_fixture(clock):
    return NotificationCenter(duration_ms=3000, clock=clock)


@pytest.fixture(name="session")
def session_fixture(store, notifications):
    return FormSession(store, notifications, policy=SIMPLE_POLICY, today=lambda: TODAY)


@pytest.fixture(name="controller")
def controller_fixture(session):
    return CatalogController(session)


@pytest.fixture(name="extended_session")
def extended_session_fixture(kv_store, notifications):
    gateway = PersistenceGateway(
        kv_store, default=seed_catalog(EXTENDED_POLICY), key="extended_products"
    )
    return FormSession(
        CatalogStore(gateway),
        notifications,
        policy=EXTENDED_POLICY,
        today=lambda: TODAY,
    )


@pytest.fixture(name="today")
def today_fixture():
    return TODAY


@pytest.fixture(name="flaky_store")
def flaky_store_fixture():
    """Factory for key-value stores with failing writes."""
    return FlakyStore
