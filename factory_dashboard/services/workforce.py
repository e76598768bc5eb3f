from __future__ import annotations

from typing import Any, Dict, List

from factory_dashboard.core.errors import NotFoundError, ValidationError
from factory_dashboard.schemas.workforce import (
    WorkforceCreate,
    WorkforceRead,
    WorkforceUpdate,
    headcount_mismatch,
)
from factory_dashboard.services.base import BaseService

WORKFORCE_UPDATED = "workforce_updated"


# PUBLIC_INTERFACE
def reconcile_department(merged: WorkforceRead) -> Dict[str, Any]:
    """Reject a merged record whose headcount breakdown does not add up."""
    problem = headcount_mismatch(merged.total, merged.present, merged.on_leave, merged.absent)
    if problem:
        raise ValidationError(problem, details=[{"field": "total", "message": problem}])
    return {}


class WorkforceService(BaseService):
    """Domain service for department attendance records."""

    # PUBLIC_INTERFACE
    async def list_departments(self, factory_id: str) -> List[WorkforceRead]:
        return await self.store.workforce.list_by_factory(factory_id)

    # PUBLIC_INTERFACE
    async def create_department(self, payload: WorkforceCreate) -> WorkforceRead:
        await self.require_factory(payload.factory_id)
        created = await self.store.workforce.create(payload)
        await self.notify(created.factory_id, WORKFORCE_UPDATED, {"id": created.id})
        return created

    # PUBLIC_INTERFACE
    async def update_department(self, department_id: int, payload: WorkforceUpdate) -> WorkforceRead:
        """Apply a partial update; present + onLeave + absent must still equal total."""
        updated = await self.store.workforce.update(
            department_id, payload.changes(), reconcile=reconcile_department
        )
        if updated is None:
            raise NotFoundError("Workforce department not found")
        await self.notify(updated.factory_id, WORKFORCE_UPDATED, {"id": updated.id})
        return updated
