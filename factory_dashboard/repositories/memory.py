"""
In-memory entity store.

Each table is a dict keyed by id plus a monotonically increasing counter. Records
are stored and returned as copies so callers cannot mutate stored state. Not
thread-safe: intended for a single event loop with one writer at a time.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from factory_dashboard.core.errors import ValidationError
from factory_dashboard.schemas.alerts import AlertCreate, AlertRead
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


class MemoryTable(Generic[ReadT]):
    """Id-keyed record map shared by the in-memory repositories."""

    def __init__(self, read_model: Type[ReadT], *, unique_field: Optional[str] = None) -> None:
        self.read_model = read_model
        self.unique_field = unique_field
        self._rows: Dict[int, ReadT] = {}
        self._next_id = 1

    def insert(self, payload: BaseModel) -> ReadT:
        values = payload.model_dump()
        if self.unique_field and self.find(self.unique_field, values[self.unique_field]) is not None:
            raise ValidationError.for_field(to_camel(self.unique_field), "already exists")
        record_id = self._next_id
        self._next_id += 1
        record = self.read_model.model_validate({**values, "id": record_id})
        self._rows[record_id] = record
        return record.model_copy()

    def get(self, record_id: int) -> Optional[ReadT]:
        record = self._rows.get(record_id)
        return record.model_copy() if record is not None else None

    def find(self, field: str, value: Any) -> Optional[ReadT]:
        for record in self._rows.values():
            if getattr(record, field) == value:
                return record.model_copy()
        return None

    def select(self, predicate: Callable[[ReadT], bool]) -> List[ReadT]:
        return [record.model_copy() for record in self._rows.values() if predicate(record)]

    def update(
        self,
        record_id: int,
        changes: Mapping[str, Any],
        reconcile: Optional[Reconcile] = None,
    ) -> Optional[ReadT]:
        current = self._rows.get(record_id)
        if current is None:
            return None
        merged = apply_reconcile(merge_record(self.read_model, current, changes), reconcile)
        if self.unique_field and self.unique_field in changes:
            clash = self.find(self.unique_field, getattr(merged, self.unique_field))
            if clash is not None and clash.id != record_id:
                raise ValidationError.for_field(to_camel(self.unique_field), "already exists")
        self._rows[record_id] = merged
        return merged.model_copy()


class MemoryScopedRepository(FactoryScopedRepository[CreateT, ReadT]):
    """Factory-scoped repository over a MemoryTable."""

    def __init__(self, read_model: Type[ReadT]) -> None:
        self.table: MemoryTable[ReadT] = MemoryTable(read_model)

    async def create(self, payload: CreateT) -> ReadT:
        return self.table.insert(payload)

    async def get(self, record_id: int) -> Optional[ReadT]:
        return self.table.get(record_id)

    async def list_by_factory(self, factory_id: str) -> List[ReadT]:
        return self.table.select(lambda record: record.factory_id == factory_id)

    async def update(
        self,
        record_id: int,
        changes: Mapping[str, Any],
        reconcile: Optional[Reconcile] = None,
    ) -> Optional[ReadT]:
        return self.table.update(record_id, changes, reconcile)


class MemoryAlertRepository(MemoryScopedRepository[AlertCreate, AlertRead], AlertRepository):
    """Alerts: unread first; sorted() is stable so insertion order holds within each group."""

    def __init__(self) -> None:
        super().__init__(AlertRead)

    async def list_by_factory(self, factory_id: str) -> List[AlertRead]:
        alerts = await super().list_by_factory(factory_id)
        return sorted(alerts, key=lambda alert: alert.read)


class MemoryFactoryRepository(FactoryRepository):
    """In-memory factories, unique by name."""

    def __init__(self) -> None:
        self.table: MemoryTable[FactoryRead] = MemoryTable(FactoryRead, unique_field="name")

    async def create(self, payload: FactoryCreate) -> FactoryRead:
        return self.table.insert(payload)

    async def get(self, record_id: int) -> Optional[FactoryRead]:
        return self.table.get(record_id)

    async def get_by_name(self, name: str) -> Optional[FactoryRead]:
        return self.table.find("name", name)

    async def list_all(self) -> List[FactoryRead]:
        return self.table.select(lambda record: True)


class MemoryUserRepository(UserRepository):
    """In-memory users, unique by username."""

    def __init__(self) -> None:
        self.table: MemoryTable[UserRecord] = MemoryTable(UserRecord, unique_field="username")

    async def create(self, payload: UserCreate) -> UserRecord:
        return self.table.insert(payload)

    async def get(self, record_id: int) -> Optional[UserRecord]:
        return self.table.get(record_id)

    async def get_by_username(self, username: str) -> Optional[UserRecord]:
        return self.table.find("username", username)

    async def update(
        self,
        record_id: int,
        changes: Mapping[str, Any],
        reconcile: Optional[Reconcile] = None,
    ) -> Optional[UserRecord]:
        return self.table.update(record_id, changes, reconcile)


class MemoryStore(Store):
    """Process-local store. Starts empty; see factory_dashboard.db.seed for fixture data."""

    def __init__(self) -> None:
        self.factories = MemoryFactoryRepository()
        self.users = MemoryUserRepository()
        self.production_lines = MemoryScopedRepository(ProductionLineRead)
        self.inventory = MemoryScopedRepository(InventoryRead)
        self.workforce = MemoryScopedRepository(WorkforceRead)
        self.alerts = MemoryAlertRepository()
        logger.info("Using in-memory entity store")
