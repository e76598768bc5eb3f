from __future__ import annotations

from typing import Optional

from sqlalchemy import Float, Text
from sqlalchemy.orm import Mapped, mapped_column

from factory_dashboard.db.base import Base, FactoryScopedMixin, IntPkMixin


class InventoryItem(IntPkMixin, FactoryScopedMixin, Base):
    """Stock level of one material at a factory, with its derived adequacy status."""
    __tablename__ = "inventory"

    material: Mapped[str] = mapped_column(Text, nullable=False)
    current_stock: Mapped[float] = mapped_column(Float, nullable=False)
    unit: Mapped[str] = mapped_column(Text, nullable=False)
    min_required: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False)
    next_delivery: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
