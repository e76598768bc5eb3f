from __future__ import annotations

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from factory_dashboard.db.base import Base, IntPkMixin


class Factory(IntPkMixin, Base):
    """Manufacturing site; its name partitions all operational data."""
    __tablename__ = "factories"

    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    location: Mapped[str] = mapped_column(Text, nullable=False)
