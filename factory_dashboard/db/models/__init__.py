"""
ORM models for dashboard entities: factories, production lines, inventory,
workforce departments, alerts and users.

Importing this package ensures model classes are registered with the Base
metadata for Alembic and runtime usage.
"""

from .factory import Factory  # noqa: F401
from .production import ProductionLine  # noqa: F401
from .inventory import InventoryItem  # noqa: F401
from .workforce import WorkforceDepartment  # noqa: F401
from .alerts import Alert  # noqa: F401
from .security import User  # noqa: F401
