from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, status

from factory_dashboard.core.deps import bind_factory, get_production_service
from factory_dashboard.db.base import MAX_RECORD_ID
from factory_dashboard.schemas.production import (
    ProductionLineCreate,
    ProductionLineRead,
    ProductionLineUpdate,
)
from factory_dashboard.services.production import ProductionService

router = APIRouter(prefix="/production", tags=["Production"])


# PUBLIC_INTERFACE
@router.get(
    "/{factory_id}",
    response_model=List[ProductionLineRead],
    summary="List production lines",
    description="Production lines of a factory in creation order.",
)
async def list_production_lines(
    factory_id: str = Depends(bind_factory),
    service: ProductionService = Depends(get_production_service),
) -> List[ProductionLineRead]:
    return await service.list_lines(factory_id)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=ProductionLineRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create production line",
    description="Create a line. Efficiency is derived from completed/target when omitted.",
)
async def create_production_line(
    payload: ProductionLineCreate,
    service: ProductionService = Depends(get_production_service),
) -> ProductionLineRead:
    return await service.create_line(payload)


# PUBLIC_INTERFACE
@router.patch(
    "/{line_id}",
    response_model=ProductionLineRead,
    summary="Update production line",
    description=(
        "Partially update a line. Changing completed or target re-derives efficiency "
        "(unless supplied) and marks the line Completed once it meets its target."
    ),
)
async def update_production_line(
    payload: ProductionLineUpdate,
    line_id: int = Path(..., ge=1, le=MAX_RECORD_ID, description="Production line id"),
    service: ProductionService = Depends(get_production_service),
) -> ProductionLineRead:
    return await service.update_line(line_id, payload)
