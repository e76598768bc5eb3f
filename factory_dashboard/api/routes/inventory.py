from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, status

from factory_dashboard.core.deps import bind_factory, get_inventory_service
from factory_dashboard.db.base import MAX_RECORD_ID
from factory_dashboard.schemas.inventory import InventoryCreate, InventoryRead, InventoryUpdate
from factory_dashboard.services.inventory import InventoryService

router = APIRouter(prefix="/inventory", tags=["Inventory"])


# PUBLIC_INTERFACE
@router.get(
    "/{factory_id}",
    response_model=List[InventoryRead],
    summary="List inventory",
    description="Inventory materials of a factory in creation order.",
)
async def list_inventory(
    factory_id: str = Depends(bind_factory),
    service: InventoryService = Depends(get_inventory_service),
) -> List[InventoryRead]:
    return await service.list_items(factory_id)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=InventoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create inventory item",
    description="Create a material record; status is derived from currentStock and minRequired.",
)
async def create_inventory_item(
    payload: InventoryCreate,
    service: InventoryService = Depends(get_inventory_service),
) -> InventoryRead:
    return await service.create_item(payload)


# PUBLIC_INTERFACE
@router.patch(
    "/{item_id}",
    response_model=InventoryRead,
    summary="Update inventory item",
    description="Partially update a material record; status is recomputed.",
)
async def update_inventory_item(
    payload: InventoryUpdate,
    item_id: int = Path(..., ge=1, le=MAX_RECORD_ID, description="Inventory item id"),
    service: InventoryService = Depends(get_inventory_service),
) -> InventoryRead:
    return await service.update_item(item_id, payload)
