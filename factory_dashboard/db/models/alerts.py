from __future__ import annotations

from sqlalchemy import Boolean, Text
from sqlalchemy.orm import Mapped, mapped_column

from factory_dashboard.db.base import Base, FactoryScopedMixin, IntPkMixin


class Alert(IntPkMixin, FactoryScopedMixin, Base):
    """Operator notification shown in the dashboard alert panel."""
    __tablename__ = "alerts"

    type: Mapped[str] = mapped_column(Text, nullable=False)  # error/warning/info
    title: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    time: Mapped[str] = mapped_column(Text, nullable=False)
    read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="false")
