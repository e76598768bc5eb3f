import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from factory_dashboard.api.main import create_app
from factory_dashboard.core.settings import AppSettings
from factory_dashboard.db.seed import seed_store
from factory_dashboard.repositories.memory import MemoryStore
from factory_dashboard.repositories.sql import SqlStore
from factory_dashboard.schemas.factory import FactoryCreate


async def _make_sql_store() -> SqlStore:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    store = SqlStore(engine)
    await store.create_schema()
    return store


@pytest.fixture
def memory_store():
    """An empty in-memory store."""
    return MemoryStore()


@pytest.fixture
async def sql_store():
    """An empty relational store on a private in-memory SQLite database."""
    store = await _make_sql_store()
    yield store
    await store.close()


@pytest.fixture(params=["memory", "sql"])
async def store(request):
    """Each store implementation, with one factory named 'Plant A'."""
    if request.param == "memory":
        instance = MemoryStore()
    else:
        instance = await _make_sql_store()
    await instance.factories.create(FactoryCreate(name="Plant A", location="Somewhere"))
    yield instance
    await instance.close()


@pytest.fixture
async def seeded_store():
    """In-memory store holding the demo fixtures."""
    store = MemoryStore()
    await seed_store(store)
    return store


@pytest.fixture
def app_settings():
    return AppSettings(
        STORAGE_BACKEND="memory",
        AUTO_SEED=True,
        SESSION_SECRET_KEY="test-secret",
        REALTIME_ENABLED=False,
    )


@pytest.fixture
def client(app_settings):
    """TestClient over a freshly seeded in-memory app."""
    app = create_app(app_settings, store=MemoryStore())
    with TestClient(app) as test_client:
        yield test_client
