"""
Public Pydantic schemas used by FastAPI routes, services, stores, and tests.

Schemas are grouped by entity (production, inventory, workforce, ...) and expose
camelCase JSON field names. Common reusable models live in ``common``.
"""

from .common import MessageResponse  # noqa: F401
