from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, Field


class WsEnvelope(BaseModel):
    """Envelope for update messages pushed to WebSocket subscribers."""
    topic: str = Field(..., description="Event name (e.g., 'production_updated', 'alert_created').")
    data: Dict[str, Any] = Field(default_factory=dict, description="Event payload.")
    at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), description="Timestamp (UTC).")
