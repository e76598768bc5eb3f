from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base schema exposing camelCase JSON field names (factoryId, currentStock, ...)
    while keeping snake_case attribute names in Python.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
        allow_inf_nan=False,
    )


class UpdateModel(CamelModel):
    """
    Base schema for partial updates.

    Only the fields declared on the subclass can be changed; anything else in the
    request body is rejected. Fields not listed in ``nullable_fields`` may be omitted
    but not set to null.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="forbid",
        allow_inf_nan=False,
    )

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_nulls(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{to_camel(name)} may not be null")
        return self

    # PUBLIC_INTERFACE
    def changes(self) -> dict[str, Any]:
        """Return only the fields explicitly present in the request, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class MessageResponse(BaseModel):
    """Standard message response."""
    message: str = Field(..., description="Human readable message")
    details: Optional[dict] = Field(default=None, description="Optional extra data")


class SuccessResponse(BaseModel):
    """Acknowledgement returned by logout."""
    success: bool = Field(True)


class ErrorInfo(BaseModel):
    """Structured error description."""
    type: str = Field(..., description="Machine-readable error type code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Any] = Field(default=None, description="Optional error details (e.g., validation issues)")


# PUBLIC_INTERFACE
class ErrorResponse(BaseModel):
    """Standardized API error envelope returned by exception handlers."""
    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Human-readable error message (same as error.message)")
    error: ErrorInfo = Field(..., description="Error details")
    correlation_id: Optional[str] = Field(default=None, description="Request correlation ID")
    path: Optional[str] = Field(default=None, description="Request path")
    method: Optional[str] = Field(default=None, description="HTTP method")
    timestamp: datetime = Field(..., description="Error timestamp (UTC)")
