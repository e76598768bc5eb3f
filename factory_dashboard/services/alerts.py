from __future__ import annotations

from typing import List

from factory_dashboard.core.errors import NotFoundError
from factory_dashboard.schemas.alerts import AlertCreate, AlertRead, AlertUpdate
from factory_dashboard.services.base import BaseService

ALERT_CREATED = "alert_created"
ALERT_UPDATED = "alert_updated"


class AlertService(BaseService):
    """Domain service for factory alerts."""

    # PUBLIC_INTERFACE
    async def list_alerts(self, factory_id: str) -> List[AlertRead]:
        """Alerts of a factory, unread first."""
        return await self.store.alerts.list_by_factory(factory_id)

    # PUBLIC_INTERFACE
    async def create_alert(self, payload: AlertCreate) -> AlertRead:
        await self.require_factory(payload.factory_id)
        created = await self.store.alerts.create(payload)
        await self.notify(created.factory_id, ALERT_CREATED, {"alert": created.model_dump(mode="json", by_alias=True)})
        return created

    # PUBLIC_INTERFACE
    async def update_alert(self, alert_id: int, payload: AlertUpdate) -> AlertRead:
        updated = await self.store.alerts.update(alert_id, payload.changes())
        if updated is None:
            raise NotFoundError("Alert not found")
        await self.notify(updated.factory_id, ALERT_UPDATED, {"id": updated.id})
        return updated
