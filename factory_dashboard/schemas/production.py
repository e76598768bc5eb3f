from __future__ import annotations

from typing import Optional, Union

from pydantic import Field, field_validator, model_validator

from factory_dashboard.schemas.common import CamelModel, UpdateModel
from factory_dashboard.schemas.enums import LineStatus
from factory_dashboard.services.rules import derive_efficiency, derive_production_status


class ProductionLineRead(CamelModel):
    """Production line read model."""
    id: int = Field(..., description="Production line id")
    name: str = Field(..., description="Line name")
    product: str = Field(..., description="Product manufactured on the line")
    target: int = Field(..., ge=0, description="Target output (units)")
    completed: int = Field(0, ge=0, description="Completed output (units)")
    efficiency: Union[int, float] = Field(0, description="Completed over target, percent")
    status: LineStatus = Field(LineStatus.ACTIVE)
    factory_id: str = Field(..., description="Owning factory name")

    @field_validator("efficiency")
    @classmethod
    def _whole_percent_as_int(cls, value: Union[int, float]) -> Union[int, float]:
        # FLOAT columns hand back 53.0 for a derived 53.
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class ProductionLineCreate(CamelModel):
    """
    Create production line payload.

    When efficiency is omitted it is derived from completed/target; a line that has
    met its target is created as Completed.
    """
    name: str = Field(..., min_length=1)
    product: str = Field(..., min_length=1)
    target: int = Field(..., ge=0)
    completed: int = Field(0, ge=0)
    efficiency: Optional[float] = Field(None, ge=0)
    status: LineStatus = Field(LineStatus.ACTIVE)
    factory_id: str = Field(..., min_length=1, description="Owning factory name")

    @model_validator(mode="after")
    def _derive_fields(self):
        if self.efficiency is None:
            self.efficiency = derive_efficiency(self.completed, self.target)
        self.status = derive_production_status(self.completed, self.target, self.status).value
        return self


class ProductionLineUpdate(UpdateModel):
    """Updatable production line fields."""
    name: Optional[str] = Field(None, min_length=1)
    product: Optional[str] = Field(None, min_length=1)
    target: Optional[int] = Field(None, ge=0)
    completed: Optional[int] = Field(None, ge=0)
    efficiency: Optional[float] = Field(None, ge=0)
    status: Optional[LineStatus] = Field(None)
