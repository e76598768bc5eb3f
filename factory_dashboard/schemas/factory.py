from __future__ import annotations

from pydantic import Field

from factory_dashboard.schemas.common import CamelModel


class FactoryRead(CamelModel):
    """Factory read model."""
    id: int = Field(..., description="Factory id")
    name: str = Field(..., description="Unique factory name, used as factoryId by scoped records")
    location: str = Field(..., description="Site location")


class FactoryCreate(CamelModel):
    """Create factory payload."""
    name: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
