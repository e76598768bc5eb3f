from __future__ import annotations

from sqlalchemy import Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from factory_dashboard.db.base import Base, FactoryScopedMixin, IntPkMixin


class ProductionLine(IntPkMixin, FactoryScopedMixin, Base):
    """Manufacturing line tracked by target/completed output and a status."""
    __tablename__ = "production_lines"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    product: Mapped[str] = mapped_column(Text, nullable=False)
    target: Mapped[int] = mapped_column(Integer, nullable=False)
    completed: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    efficiency: Mapped[float] = mapped_column(Float, nullable=False, default=0, server_default="0")
    status: Mapped[str] = mapped_column(Text, nullable=False, default="Active", server_default="Active")
