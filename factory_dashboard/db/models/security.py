from __future__ import annotations

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from factory_dashboard.db.base import Base, IntPkMixin


class User(IntPkMixin, Base):
    """Dashboard user."""
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)  # passlib hash
    name: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str] = mapped_column(Text, nullable=False)
    factory: Mapped[str] = mapped_column(Text, nullable=False)
