from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from factory_dashboard.core.errors import NotFoundError
from factory_dashboard.schemas.production import (
    ProductionLineCreate,
    ProductionLineRead,
    ProductionLineUpdate,
)
from factory_dashboard.services.base import BaseService
from factory_dashboard.services.rules import derive_efficiency, derive_production_status

logger = logging.getLogger(__name__)

PRODUCTION_UPDATED = "production_updated"


# PUBLIC_INTERFACE
def reconcile_line(merged: ProductionLineRead, changes: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Derived fields for an updated production line.

    Only a change of completed or target triggers derivation: efficiency is recomputed
    unless the same update supplies it, and a line that meets its target becomes
    Completed.
    """
    if "completed" not in changes and "target" not in changes:
        return {}
    derived: Dict[str, Any] = {
        "status": derive_production_status(merged.completed, merged.target, merged.status).value,
    }
    if "efficiency" not in changes:
        derived["efficiency"] = derive_efficiency(merged.completed, merged.target)
    return derived


class ProductionService(BaseService):
    """
    Domain service for production lines.

    Handles factory validation, efficiency/status derivation and pushing update
    events to subscribers.
    """

    # PUBLIC_INTERFACE
    async def list_lines(self, factory_id: str) -> List[ProductionLineRead]:
        """Lines of a factory in insertion order; empty for unknown factories."""
        return await self.store.production_lines.list_by_factory(factory_id)

    # PUBLIC_INTERFACE
    async def create_line(self, payload: ProductionLineCreate) -> ProductionLineRead:
        """
        Create a production line.

        Parameters:
            payload: ProductionLineCreate request; efficiency and status already derived
        Returns:
            Created ProductionLineRead
        """
        await self.require_factory(payload.factory_id)
        created = await self.store.production_lines.create(payload)
        logger.info("Created production line id=%s name=%s", created.id, created.name)
        await self.notify(created.factory_id, PRODUCTION_UPDATED, {"id": created.id})
        return created

    # PUBLIC_INTERFACE
    async def update_line(self, line_id: int, payload: ProductionLineUpdate) -> ProductionLineRead:
        """Apply a partial update, re-deriving efficiency and status when output changes."""
        changes = payload.changes()
        updated = await self.store.production_lines.update(
            line_id, changes, reconcile=lambda merged: reconcile_line(merged, changes)
        )
        if updated is None:
            raise NotFoundError("Production line not found")
        await self.notify(updated.factory_id, PRODUCTION_UPDATED, {"id": updated.id})
        return updated
