from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, status

from factory_dashboard.core.deps import bind_factory, get_workforce_service
from factory_dashboard.db.base import MAX_RECORD_ID
from factory_dashboard.schemas.workforce import WorkforceCreate, WorkforceRead, WorkforceUpdate
from factory_dashboard.services.workforce import WorkforceService

router = APIRouter(prefix="/workforce", tags=["Workforce"])


# PUBLIC_INTERFACE
@router.get(
    "/{factory_id}",
    response_model=List[WorkforceRead],
    summary="List departments",
    description="Department attendance records of a factory.",
)
async def list_workforce(
    factory_id: str = Depends(bind_factory),
    service: WorkforceService = Depends(get_workforce_service),
) -> List[WorkforceRead]:
    return await service.list_departments(factory_id)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=WorkforceRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create department",
    description="Create a department record; present + onLeave + absent must equal total.",
)
async def create_department(
    payload: WorkforceCreate,
    service: WorkforceService = Depends(get_workforce_service),
) -> WorkforceRead:
    return await service.create_department(payload)


# PUBLIC_INTERFACE
@router.patch(
    "/{department_id}",
    response_model=WorkforceRead,
    summary="Update department",
    description="Partially update a department record; the headcount must still add up.",
)
async def update_department(
    payload: WorkforceUpdate,
    department_id: int = Path(..., ge=1, le=MAX_RECORD_ID, description="Department record id"),
    service: WorkforceService = Depends(get_workforce_service),
) -> WorkforceRead:
    return await service.update_department(department_id, payload)
