from __future__ import annotations

import logging
from typing import Any, Dict, List

from factory_dashboard.core.errors import NotFoundError
from factory_dashboard.schemas.inventory import InventoryCreate, InventoryRead, InventoryUpdate
from factory_dashboard.services.base import BaseService
from factory_dashboard.services.rules import derive_inventory_status

logger = logging.getLogger(__name__)

INVENTORY_UPDATED = "inventory_updated"


# PUBLIC_INTERFACE
def reconcile_item(merged: InventoryRead) -> Dict[str, Any]:
    """Status always follows the merged stock and minimum."""
    return {"status": derive_inventory_status(merged.current_stock, merged.min_required).value}


class InventoryService(BaseService):
    """Domain service for inventory materials; status is derived on every write."""

    # PUBLIC_INTERFACE
    async def list_items(self, factory_id: str) -> List[InventoryRead]:
        return await self.store.inventory.list_by_factory(factory_id)

    # PUBLIC_INTERFACE
    async def create_item(self, payload: InventoryCreate) -> InventoryRead:
        await self.require_factory(payload.factory_id)
        created = await self.store.inventory.create(payload)
        logger.info("Created inventory item id=%s material=%s status=%s", created.id, created.material, created.status)
        await self.notify(created.factory_id, INVENTORY_UPDATED, {"id": created.id})
        return created

    # PUBLIC_INTERFACE
    async def update_item(self, item_id: int, payload: InventoryUpdate) -> InventoryRead:
        """Apply a partial update and recompute status in the same store operation."""
        updated = await self.store.inventory.update(item_id, payload.changes(), reconcile=reconcile_item)
        if updated is None:
            raise NotFoundError("Inventory item not found")
        await self.notify(updated.factory_id, INVENTORY_UPDATED, {"id": updated.id})
        return updated
