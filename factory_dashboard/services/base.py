from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from factory_dashboard.core.errors import ValidationError
from factory_dashboard.repositories.base import Store
from factory_dashboard.schemas.factory import FactoryRead
from factory_dashboard.services.realtime import BroadcastManager

logger = logging.getLogger(__name__)


class BaseService:
    """
    Base class for services. Holds the entity store and the update notifier.

    Services keep business rules and orchestration, delegating data access to the
    store's repositories.
    """

    def __init__(self, store: Store, notifier: Optional[BroadcastManager] = None) -> None:
        self.store = store
        self.notifier = notifier

    async def require_factory(self, factory_id: str, field: str = "factoryId") -> FactoryRead:
        """Return the factory named ``factory_id`` or fail validation on ``field``."""
        factory = await self.store.factories.get_by_name(factory_id)
        if factory is None:
            raise ValidationError.for_field(field, f"unknown factory '{factory_id}'")
        return factory

    async def notify(self, factory_id: str, topic: str, data: Optional[Dict[str, Any]] = None) -> None:
        """Publish an update event for the factory; failures are logged, never raised."""
        if self.notifier is None:
            return
        try:
            await self.notifier.publish(factory_id, topic, {"factoryId": factory_id, **(data or {})})
        except Exception:
            logger.exception("Failed to publish %s for factory %s", topic, factory_id)
