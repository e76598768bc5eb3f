from __future__ import annotations

import logging
from typing import List

from factory_dashboard.core.errors import ValidationError
from factory_dashboard.schemas.factory import FactoryCreate, FactoryRead
from factory_dashboard.services.base import BaseService

logger = logging.getLogger(__name__)


class FactoryService(BaseService):
    """Factories are created administratively and are immutable afterwards."""

    # PUBLIC_INTERFACE
    async def list_factories(self) -> List[FactoryRead]:
        return await self.store.factories.list_all()

    # PUBLIC_INTERFACE
    async def create_factory(self, payload: FactoryCreate) -> FactoryRead:
        """Create a factory; names are unique because scoped records reference them."""
        if await self.store.factories.get_by_name(payload.name) is not None:
            raise ValidationError.for_field("name", "already exists")
        created = await self.store.factories.create(payload)
        logger.info("Created factory id=%s name=%s", created.id, created.name)
        return created
