"""
Dashboard metrics aggregation.

Metrics are recomputed from the store on every call; nothing is cached.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from factory_dashboard.repositories.base import Store
from factory_dashboard.schemas.dashboard import DashboardMetrics
from factory_dashboard.schemas.enums import LineStatus
from factory_dashboard.schemas.production import ProductionLineRead
from factory_dashboard.schemas.workforce import WorkforceRead
from factory_dashboard.services.rules import round_half_up


def _active_statuses(count_completed_as_active: bool) -> frozenset:
    if count_completed_as_active:
        return frozenset({LineStatus.ACTIVE.value, LineStatus.COMPLETED.value})
    return frozenset({LineStatus.ACTIVE.value})


# PUBLIC_INTERFACE
def summarize_metrics(
    lines: Sequence[ProductionLineRead],
    departments: Iterable[WorkforceRead],
    *,
    count_completed_as_active: bool = True,
) -> DashboardMetrics:
    """
    Aggregate production lines and workforce departments into dashboard metrics.

    Parameters:
        lines: production lines of one factory
        departments: workforce departments of the same factory
        count_completed_as_active: count Completed lines as active (not stalled)
    Returns:
        DashboardMetrics; every figure is 0 (ratios "0/0") for empty inputs.
    """
    active = _active_statuses(count_completed_as_active)
    total_lines = len(lines)
    active_lines = sum(1 for line in lines if line.status in active)
    efficiency = round_half_up(sum(line.efficiency for line in lines) / total_lines) if total_lines else 0
    output = sum(line.completed for line in lines)

    employees = 0
    present = 0
    for dept in departments:
        employees += dept.total
        present += dept.present
    attendance_rate = round_half_up(present * 100 / employees) if employees else 0

    return DashboardMetrics(
        production_efficiency=efficiency,
        active_lines=f"{active_lines}/{total_lines}",
        todays_output=output,
        attendance=f"{present}/{employees}",
        attendance_rate=attendance_rate,
    )


# PUBLIC_INTERFACE
async def compute_dashboard_metrics(
    store: Store,
    factory_id: str,
    *,
    count_completed_as_active: bool = True,
) -> DashboardMetrics:
    """Read the factory's lines and departments from the store and aggregate them."""
    lines = await store.production_lines.list_by_factory(factory_id)
    departments = await store.workforce.list_by_factory(factory_id)
    return summarize_metrics(lines, departments, count_completed_as_active=count_completed_as_active)
