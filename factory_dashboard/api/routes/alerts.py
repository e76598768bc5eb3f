from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, status

from factory_dashboard.core.deps import bind_factory, get_alert_service
from factory_dashboard.db.base import MAX_RECORD_ID
from factory_dashboard.schemas.alerts import AlertCreate, AlertRead, AlertUpdate
from factory_dashboard.services.alerts import AlertService

router = APIRouter(prefix="/alerts", tags=["Alerts"])


# PUBLIC_INTERFACE
@router.get(
    "/{factory_id}",
    response_model=List[AlertRead],
    summary="List alerts",
    description="Alerts of a factory, unread before read.",
)
async def list_alerts(
    factory_id: str = Depends(bind_factory),
    service: AlertService = Depends(get_alert_service),
) -> List[AlertRead]:
    return await service.list_alerts(factory_id)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=AlertRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create alert",
)
async def create_alert(
    payload: AlertCreate,
    service: AlertService = Depends(get_alert_service),
) -> AlertRead:
    return await service.create_alert(payload)


# PUBLIC_INTERFACE
@router.patch(
    "/{alert_id}",
    response_model=AlertRead,
    summary="Update alert",
    description="Partially update an alert, typically to mark it read.",
)
async def update_alert(
    payload: AlertUpdate,
    alert_id: int = Path(..., ge=1, le=MAX_RECORD_ID, description="Alert id"),
    service: AlertService = Depends(get_alert_service),
) -> AlertRead:
    return await service.update_alert(alert_id, payload)
