from __future__ import annotations

from enum import Enum


class LineStatus(str, Enum):
    """Production line status."""
    ACTIVE = "Active"
    DELAYED = "Delayed"
    MAINTENANCE = "Maintenance"
    COMPLETED = "Completed"


class InventoryStatus(str, Enum):
    """Inventory adequacy classification."""
    ADEQUATE = "Adequate"
    LOW_STOCK = "Low Stock"
    CRITICAL = "Critical"


class AlertType(str, Enum):
    """Alert severity."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
