"""
Entity store layer.

``Store`` bundles one repository per entity type. ``build_store`` picks the
implementation from configuration: ``MemoryStore`` for tests/development or
``SqlStore`` (SQLAlchemy async) for production.
"""
from __future__ import annotations

from typing import Optional

from factory_dashboard.core.settings import AppSettings
from factory_dashboard.db.config import Settings

from .base import Store
from .memory import MemoryStore


# PUBLIC_INTERFACE
def build_store(app_settings: AppSettings, db_settings: Optional[Settings] = None) -> Store:
    """Create the store selected by STORAGE_BACKEND. No connection is opened until first use."""
    if app_settings.STORAGE_BACKEND == "database":
        from factory_dashboard.db.session import create_engine_from_settings
        from .sql import SqlStore

        return SqlStore(create_engine_from_settings(db_settings))
    return MemoryStore()


__all__ = ["Store", "MemoryStore", "build_store"]
