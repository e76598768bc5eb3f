from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from factory_dashboard.core.deps import get_factory_service
from factory_dashboard.schemas.factory import FactoryCreate, FactoryRead
from factory_dashboard.services.factories import FactoryService

router = APIRouter(prefix="/factories", tags=["Factories"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[FactoryRead],
    summary="List factories",
    description="List every factory in id order.",
)
async def list_factories(service: FactoryService = Depends(get_factory_service)) -> List[FactoryRead]:
    """Return all factories."""
    return await service.list_factories()


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=FactoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create factory",
    description="Create a factory. Names are unique and are used as factoryId by scoped records.",
)
async def create_factory(
    payload: FactoryCreate,
    service: FactoryService = Depends(get_factory_service),
) -> FactoryRead:
    return await service.create_factory(payload)
