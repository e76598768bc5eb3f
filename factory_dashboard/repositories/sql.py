"""
Relational entity store backed by the SQLAlchemy async ORM.

Every repository call opens its own session and transaction. Updates lock the row
(SELECT ... FOR UPDATE on PostgreSQL), merge the changes, recompute derived fields
and commit in one transaction, so concurrent updates to the same record serialize.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Generic, List, Mapping, Optional, Sequence, Type

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from sqlalchemy import Executable, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from factory_dashboard.core.errors import InternalError, ValidationError
from factory_dashboard.db.base import MAX_RECORD_ID, Base
from factory_dashboard.db.models import (
    Alert,
    Factory,
    InventoryItem,
    ProductionLine,
    User,
    WorkforceDepartment,
)
from factory_dashboard.db.session import create_session_maker
from factory_dashboard.schemas.alerts import AlertRead
from factory_dashboard.schemas.auth import UserCreate, UserRecord
from factory_dashboard.schemas.factory import FactoryCreate, FactoryRead
from factory_dashboard.schemas.inventory import InventoryRead
from factory_dashboard.schemas.production import ProductionLineRead
from factory_dashboard.schemas.workforce import WorkforceRead

from .base import (
    AlertRepository,
    CreateT,
    FactoryRepository,
    FactoryScopedRepository,
    ReadT,
    Reconcile,
    Store,
    UserRepository,
    apply_reconcile,
    merge_record,
)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ReadT]):
    """
    Base class for SQL repositories providing session handling and row conversion.

    Database failures surface as InternalError; unique constraint violations on
    ``unique_field`` surface as ValidationError.
    """

    def __init__(
        self,
        sessions: async_sessionmaker[AsyncSession],
        orm_model: Type[Base],
        read_model: Type[ReadT],
        *,
        unique_field: Optional[str] = None,
    ) -> None:
        self.sessions = sessions
        self.orm_model = orm_model
        self.read_model = read_model
        self.unique_field = unique_field

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a fresh session, translating SQLAlchemy errors to domain errors."""
        try:
            async with self.sessions() as session:
                yield session
        except IntegrityError as exc:
            if self.unique_field:
                raise ValidationError.for_field(to_camel(self.unique_field), "already exists") from exc
            raise ValidationError(str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            logger.exception("Database error in %s", type(self).__name__)
            raise InternalError(str(exc)) from exc

    def to_read(self, row: Any) -> ReadT:
        return self.read_model.model_validate(row)

    async def scalars(self, statement: Executable) -> List[ReadT]:
        """Execute and convert every row."""
        async with self.session() as session:
            result = await session.execute(statement)
            return [self.to_read(row) for row in result.scalars()]

    async def scalar_one_or_none(self, statement: Executable) -> Optional[ReadT]:
        """Execute and convert a single row, or None."""
        async with self.session() as session:
            result = await session.execute(statement)
            row = result.scalar_one_or_none()
            return self.to_read(row) if row is not None else None

    async def insert(self, payload: BaseModel) -> ReadT:
        """Insert a row built from the payload and return it with its assigned id."""
        async with self.session() as session:
            row = self.orm_model(**payload.model_dump(mode="json"))
            session.add(row)
            await session.commit()
            return self.to_read(row)

    async def get(self, record_id: int) -> Optional[ReadT]:
        if not 1 <= record_id <= MAX_RECORD_ID:
            return None
        async with self.session() as session:
            row = await session.get(self.orm_model, record_id)
            return self.to_read(row) if row is not None else None

    async def update(
        self,
        record_id: int,
        changes: Mapping[str, Any],
        reconcile: Optional[Reconcile] = None,
    ) -> Optional[ReadT]:
        if not 1 <= record_id <= MAX_RECORD_ID:
            return None
        async with self.session() as session:
            async with session.begin():
                stmt = select(self.orm_model).where(self.orm_model.id == record_id).with_for_update()
                row = (await session.execute(stmt)).scalar_one_or_none()
                if row is None:
                    return None
                merged = apply_reconcile(merge_record(self.read_model, self.to_read(row), changes), reconcile)
                for key, value in merged.model_dump(mode="json", exclude={"id"}).items():
                    setattr(row, key, value)
            return merged


class SqlScopedRepository(BaseRepository[ReadT], FactoryScopedRepository[CreateT, ReadT]):
    """Factory-scoped repository over one table, listed in id order."""

    async def create(self, payload: CreateT) -> ReadT:
        return await self.insert(payload)

    async def list_by_factory(self, factory_id: str) -> List[ReadT]:
        stmt = (
            select(self.orm_model)
            .where(self.orm_model.factory_id == factory_id)
            .order_by(*self.ordering())
        )
        return await self.scalars(stmt)

    def ordering(self) -> Sequence[Any]:
        return (self.orm_model.id.asc(),)


class SqlAlertRepository(SqlScopedRepository, AlertRepository):
    """Alerts: unread first, then by id."""

    def __init__(self, sessions: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(sessions, Alert, AlertRead)

    def ordering(self) -> Sequence[Any]:
        return (Alert.read.asc(), Alert.id.asc())


class SqlFactoryRepository(BaseRepository[FactoryRead], FactoryRepository):
    """Factories table, unique by name."""

    def __init__(self, sessions: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(sessions, Factory, FactoryRead, unique_field="name")

    async def create(self, payload: FactoryCreate) -> FactoryRead:
        return await self.insert(payload)

    async def get_by_name(self, name: str) -> Optional[FactoryRead]:
        return await self.scalar_one_or_none(select(Factory).where(Factory.name == name))

    async def list_all(self) -> List[FactoryRead]:
        return await self.scalars(select(Factory).order_by(Factory.id.asc()))


class SqlUserRepository(BaseRepository[UserRecord], UserRepository):
    """Users table, unique by username."""

    def __init__(self, sessions: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(sessions, User, UserRecord, unique_field="username")

    async def create(self, payload: UserCreate) -> UserRecord:
        return await self.insert(payload)

    async def get_by_username(self, username: str) -> Optional[UserRecord]:
        return await self.scalar_one_or_none(select(User).where(User.username == username))


class SqlStore(Store):
    """Store over a relational database reachable through an AsyncEngine."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        sessions = create_session_maker(engine)
        self.factories = SqlFactoryRepository(sessions)
        self.users = SqlUserRepository(sessions)
        self.production_lines = SqlScopedRepository(sessions, ProductionLine, ProductionLineRead)
        self.inventory = SqlScopedRepository(sessions, InventoryItem, InventoryRead)
        self.workforce = SqlScopedRepository(sessions, WorkforceDepartment, WorkforceRead)
        self.alerts = SqlAlertRepository(sessions)
        logger.info("Using relational entity store (%s)", engine.url.get_backend_name())

    # PUBLIC_INTERFACE
    async def create_schema(self) -> None:
        """Create all tables directly from metadata (tests and local development)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        await self.engine.dispose()
