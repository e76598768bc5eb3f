from __future__ import annotations

from typing import Optional

from pydantic import Field, model_validator

from factory_dashboard.schemas.common import CamelModel, UpdateModel


class WorkforceRead(CamelModel):
    """Department headcount read model."""
    id: int = Field(..., description="Department record id")
    department: str = Field(..., description="Department name")
    total: int = Field(..., ge=0)
    present: int = Field(..., ge=0)
    on_leave: int = Field(..., ge=0)
    absent: int = Field(..., ge=0)
    factory_id: str = Field(..., description="Owning factory name")


class WorkforceCreate(CamelModel):
    """Create department payload; present + onLeave + absent must equal total."""
    department: str = Field(..., min_length=1)
    total: int = Field(..., ge=0)
    present: int = Field(..., ge=0)
    on_leave: int = Field(..., ge=0)
    absent: int = Field(..., ge=0)
    factory_id: str = Field(..., min_length=1, description="Owning factory name")

    @model_validator(mode="after")
    def _check_headcount(self):
        problem = headcount_mismatch(self.total, self.present, self.on_leave, self.absent)
        if problem:
            raise ValueError(problem)
        return self


class WorkforceUpdate(UpdateModel):
    """Updatable department fields. The headcount invariant is checked on the merged record."""
    department: Optional[str] = Field(None, min_length=1)
    total: Optional[int] = Field(None, ge=0)
    present: Optional[int] = Field(None, ge=0)
    on_leave: Optional[int] = Field(None, ge=0)
    absent: Optional[int] = Field(None, ge=0)


# PUBLIC_INTERFACE
def headcount_mismatch(total: int, present: int, on_leave: int, absent: int) -> Optional[str]:
    """Describe a headcount breakdown that does not add up to total, or None when it does."""
    counted = present + on_leave + absent
    if counted != total:
        return f"present + onLeave + absent ({counted}) must equal total ({total})"
    return None
