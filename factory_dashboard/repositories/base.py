"""
Abstract entity store contracts.

Services, the metrics aggregator and the API layer are written against these
classes only. Two implementations exist: ``MemoryStore`` (process-local maps,
used in tests and development) and ``SqlStore`` (SQLAlchemy async ORM).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from factory_dashboard.core.errors import ValidationError
from factory_dashboard.schemas.alerts import AlertCreate, AlertRead
from factory_dashboard.schemas.auth import UserCreate, UserRecord
from factory_dashboard.schemas.factory import FactoryCreate, FactoryRead
from factory_dashboard.schemas.inventory import InventoryCreate, InventoryRead
from factory_dashboard.schemas.production import ProductionLineCreate, ProductionLineRead
from factory_dashboard.schemas.workforce import WorkforceCreate, WorkforceRead

CreateT = TypeVar("CreateT", bound=BaseModel)
ReadT = TypeVar("ReadT", bound=BaseModel)

# Recomputes derived fields of a merged record; may raise ValidationError to abort the update.
Reconcile = Callable[[Any], Dict[str, Any]]


class Repository(ABC, Generic[CreateT, ReadT]):
    """Insert and fetch records of one entity type. Ids start at 1 and are never reused."""

    @abstractmethod
    async def create(self, payload: CreateT) -> ReadT:
        """Insert a record, assigning the next id."""

    @abstractmethod
    async def get(self, record_id: int) -> Optional[ReadT]:
        """Return the record with this id, or None."""


class MutableRepository(Repository[CreateT, ReadT]):
    """Repository whose records accept partial updates."""

    @abstractmethod
    async def update(
        self,
        record_id: int,
        changes: Mapping[str, Any],
        reconcile: Optional[Reconcile] = None,
    ) -> Optional[ReadT]:
        """
        Merge ``changes`` into the record and persist it.

        ``reconcile`` receives the merged record and returns derived field values that
        are written together with the changes. Returns None for unknown ids.
        """


class FactoryScopedRepository(MutableRepository[CreateT, ReadT]):
    """Repository of records partitioned by factory name."""

    @abstractmethod
    async def list_by_factory(self, factory_id: str) -> List[ReadT]:
        """Return the factory's records in insertion order."""


class FactoryRepository(Repository[FactoryCreate, FactoryRead]):
    """Factories are created administratively and never change."""

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[FactoryRead]:
        """Return the factory with this unique name, or None."""

    @abstractmethod
    async def list_all(self) -> List[FactoryRead]:
        """Return every factory in id order."""


class UserRepository(MutableRepository[UserCreate, UserRecord]):
    """User accounts, unique by username."""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[UserRecord]:
        """Return the user with this username, or None."""


class AlertRepository(FactoryScopedRepository[AlertCreate, AlertRead]):
    """Alerts list unread before read, otherwise in insertion order."""


class Store(ABC):
    """Bundle of repositories for every entity type, passed explicitly to services."""

    factories: FactoryRepository
    users: UserRepository
    production_lines: FactoryScopedRepository[ProductionLineCreate, ProductionLineRead]
    inventory: FactoryScopedRepository[InventoryCreate, InventoryRead]
    workforce: FactoryScopedRepository[WorkforceCreate, WorkforceRead]
    alerts: AlertRepository

    async def close(self) -> None:
        """Release backing resources."""


# PUBLIC_INTERFACE
def merge_record(read_model: Type[ReadT], current: ReadT, changes: Mapping[str, Any]) -> ReadT:
    """
    Apply a partial update to a record, rejecting fields the entity does not have.

    The id can never be changed. The merged record is re-validated so type and range
    constraints of the read model still hold.
    """
    allowed = set(read_model.model_fields) - {"id"}
    unknown = sorted(key for key in changes if key not in allowed)
    if unknown:
        raise ValidationError.for_field(to_camel(unknown[0]), "field cannot be updated")
    try:
        return read_model.model_validate({**current.model_dump(), **dict(changes)})
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(to_camel(str(part)) for part in first["loc"])
        raise ValidationError.for_field(field, first["msg"]) from exc


# PUBLIC_INTERFACE
def apply_reconcile(record: ReadT, reconcile: Optional[Reconcile]) -> ReadT:
    """Return the record with derived fields from ``reconcile`` applied."""
    if reconcile is None:
        return record
    derived = reconcile(record)
    if not derived:
        return record
    return record.model_copy(update=derived)
