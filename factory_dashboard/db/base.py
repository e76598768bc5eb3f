from __future__ import annotations

from sqlalchemy import Integer, MetaData, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


# Standardized naming convention for alembic-friendly constraints/indexes.
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Declarative base class with metadata naming conventions."""
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# Largest value the INTEGER id columns hold on every supported backend.
MAX_RECORD_ID = 2**31 - 1


class IntPkMixin:
    """Mixin that provides a sequential integer primary key."""
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class FactoryScopedMixin:
    """
    Mixin that scopes a row to a factory by the factory's name.

    This is a plain indexed text column rather than a foreign key; lookups filter on it.
    """
    factory_id: Mapped[str] = mapped_column(Text, nullable=False, index=True)
