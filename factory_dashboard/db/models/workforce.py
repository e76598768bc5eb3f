from __future__ import annotations

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from factory_dashboard.db.base import Base, FactoryScopedMixin, IntPkMixin


class WorkforceDepartment(IntPkMixin, FactoryScopedMixin, Base):
    """Headcount breakdown for one department."""
    __tablename__ = "workforce"

    department: Mapped[str] = mapped_column(Text, nullable=False)
    total: Mapped[int] = mapped_column(Integer, nullable=False)
    present: Mapped[int] = mapped_column(Integer, nullable=False)
    on_leave: Mapped[int] = mapped_column(Integer, nullable=False)
    absent: Mapped[int] = mapped_column(Integer, nullable=False)
