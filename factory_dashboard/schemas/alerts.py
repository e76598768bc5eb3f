from __future__ import annotations

from typing import Optional

from pydantic import Field

from factory_dashboard.schemas.common import CamelModel, UpdateModel
from factory_dashboard.schemas.enums import AlertType


class AlertRead(CamelModel):
    """Alert read model."""
    id: int = Field(..., description="Alert id")
    type: AlertType = Field(..., description="Severity")
    title: str = Field(...)
    message: str = Field(...)
    time: str = Field(..., description="Display time label, e.g. '10 minutes ago'")
    read: bool = Field(False)
    factory_id: str = Field(..., description="Owning factory name")


class AlertCreate(CamelModel):
    """Create alert payload."""
    type: AlertType = Field(...)
    title: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    time: str = Field(...)
    read: bool = Field(False)
    factory_id: str = Field(..., min_length=1, description="Owning factory name")


class AlertUpdate(UpdateModel):
    """Updatable alert fields (typically just read)."""
    type: Optional[AlertType] = Field(None)
    title: Optional[str] = Field(None, min_length=1)
    message: Optional[str] = Field(None, min_length=1)
    time: Optional[str] = Field(None)
    read: Optional[bool] = Field(None)
