"""
Database package initializer exposing key public interfaces for configuration
and engine/session construction.
"""

from .base import Base
from .config import get_settings, Settings
from .session import create_engine_from_settings, create_session_maker

# Import models to ensure they are registered with SQLAlchemy metadata
# when the db package is imported.
from . import models as models  # noqa: F401

__all__ = [
    "Base",
    "Settings",
    "get_settings",
    "create_engine_from_settings",
    "create_session_maker",
    "models",
]
