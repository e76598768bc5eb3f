from __future__ import annotations

from typing import ClassVar, FrozenSet, Optional

from pydantic import Field, model_validator

from factory_dashboard.schemas.common import CamelModel, UpdateModel
from factory_dashboard.schemas.enums import InventoryStatus
from factory_dashboard.services.rules import derive_inventory_status


class InventoryRead(CamelModel):
    """Read model for an inventory material record."""
    id: int = Field(..., description="Inventory item id")
    material: str = Field(..., description="Material name")
    current_stock: float = Field(..., ge=0, description="Stock on hand")
    unit: str = Field(..., description="Unit of measure")
    min_required: float = Field(..., ge=0, description="Minimum stock level")
    status: InventoryStatus = Field(..., description="Derived adequacy status")
    next_delivery: Optional[str] = Field(None, description="Next delivery label")
    factory_id: str = Field(..., description="Owning factory name")


class InventoryCreate(CamelModel):
    """
    Create inventory payload.

    ``status`` is accepted for client compatibility but always replaced by the value
    derived from currentStock and minRequired.
    """
    material: str = Field(..., min_length=1)
    current_stock: float = Field(..., ge=0)
    unit: str = Field(..., min_length=1)
    min_required: float = Field(..., ge=0)
    status: Optional[InventoryStatus] = Field(None)
    next_delivery: Optional[str] = Field(None)
    factory_id: str = Field(..., min_length=1, description="Owning factory name")

    @model_validator(mode="after")
    def _derive_status(self):
        self.status = derive_inventory_status(self.current_stock, self.min_required).value
        return self


class InventoryUpdate(UpdateModel):
    """Updatable inventory fields. A supplied status is recomputed after the merge."""
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"next_delivery"})

    material: Optional[str] = Field(None, min_length=1)
    current_stock: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = Field(None, min_length=1)
    min_required: Optional[float] = Field(None, ge=0)
    status: Optional[InventoryStatus] = Field(None)
    next_delivery: Optional[str] = Field(None)
