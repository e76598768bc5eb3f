from __future__ import annotations

from fastapi import APIRouter, Depends

from factory_dashboard.core.deps import bind_factory, get_settings, get_store
from factory_dashboard.core.settings import AppSettings
from factory_dashboard.repositories.base import Store
from factory_dashboard.schemas.dashboard import DashboardMetrics
from factory_dashboard.services.metrics import compute_dashboard_metrics

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


# PUBLIC_INTERFACE
@router.get(
    "/{factory_id}",
    response_model=DashboardMetrics,
    summary="Dashboard metrics",
    description=(
        "Efficiency, active-line ratio, output and attendance for one factory, "
        "computed from current records. Unknown factories report zeros."
    ),
)
async def get_dashboard_metrics(
    factory_id: str = Depends(bind_factory),
    store: Store = Depends(get_store),
    settings: AppSettings = Depends(get_settings),
) -> DashboardMetrics:
    return await compute_dashboard_metrics(
        store, factory_id, count_completed_as_active=settings.COUNT_COMPLETED_AS_ACTIVE
    )
