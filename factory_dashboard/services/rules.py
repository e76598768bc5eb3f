"""
Derivation rules for computed record fields.

Pure functions with no side effects: inventory adequacy, production line status
and line efficiency. Services apply them on every write path that changes an input.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from factory_dashboard.schemas.enums import InventoryStatus, LineStatus

Number = Union[int, float, Decimal]


# PUBLIC_INTERFACE
def round_half_up(value: Number) -> int:
    """Round to the nearest integer, halves away from zero (52.5 -> 53)."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


# PUBLIC_INTERFACE
def derive_inventory_status(current_stock: Number, min_required: Number) -> InventoryStatus:
    """
    Classify stock against its minimum.

    Below half the minimum is Critical, below the minimum is Low Stock, anything else
    is Adequate. Exactly half the minimum is Low Stock. A minimum of zero makes every
    non-negative stock Adequate.
    """
    if current_stock * 2 < min_required:
        return InventoryStatus.CRITICAL
    if current_stock < min_required:
        return InventoryStatus.LOW_STOCK
    return InventoryStatus.ADEQUATE


# PUBLIC_INTERFACE
def derive_production_status(completed: int, target: int, current_status: Union[LineStatus, str]) -> LineStatus:
    """Mark a line Completed once it meets its target; otherwise keep the caller-set status."""
    if completed >= target:
        return LineStatus.COMPLETED
    return LineStatus(current_status)


# PUBLIC_INTERFACE
def derive_efficiency(completed: Number, target: Number) -> int:
    """Completed over target as a whole percent; 0 when there is no target."""
    if target <= 0:
        return 0
    ratio = Decimal(str(completed)) * 100 / Decimal(str(target))
    return round_half_up(ratio)
