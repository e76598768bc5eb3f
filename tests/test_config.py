from factory_dashboard.core.settings import AppSettings
from factory_dashboard.db.config import Settings
from factory_dashboard.repositories import MemoryStore, build_store
from factory_dashboard.repositories.sql import SqlStore


def test_postgres_urls_are_normalized_to_asyncpg():
    settings = Settings(POSTGRES_URL="postgres://u:p@db:5432/plant")
    assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5432/plant"
    assert settings.sync_database_url == "postgresql://u:p@db:5432/plant"


def test_other_drivers_pass_through():
    settings = Settings(POSTGRES_URL="sqlite+aiosqlite:///./dash.db")
    assert settings.async_database_url == "sqlite+aiosqlite:///./dash.db"


def test_seeding_defaults_follow_backend():
    assert AppSettings(STORAGE_BACKEND="memory").should_seed is True
    assert AppSettings(STORAGE_BACKEND="database").should_seed is False
    assert AppSettings(STORAGE_BACKEND="database", AUTO_SEED=True).should_seed is True


def test_cors_origins_accept_comma_separated_values():
    settings = AppSettings(CORS_ORIGINS="http://a.test, http://b.test")
    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]


async def test_build_store_selects_backend():
    assert isinstance(build_store(AppSettings(STORAGE_BACKEND="memory")), MemoryStore)
    store = build_store(
        AppSettings(STORAGE_BACKEND="database"),
        Settings(POSTGRES_URL="sqlite+aiosqlite://"),
    )
    assert isinstance(store, SqlStore)
    await store.close()
