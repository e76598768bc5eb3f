"""
Fixture data for development and demos.

Seeds:
- Three factories (Jaipur, Pune, Coimbatore)
- Demo user "sanjay"
- Production lines, inventory, workforce departments and alerts for
  "Jaipur Manufacturing Unit"

Everything is written through the Store contract, so the same fixtures work for
the in-memory and the relational store.

Usage:
  python -m factory_dashboard.db.run_migrations upgrade head
  python -m factory_dashboard.db.seed
"""

from __future__ import annotations

import asyncio
import logging

from factory_dashboard.core.security import get_password_hash
from factory_dashboard.repositories.base import Store
from factory_dashboard.schemas.alerts import AlertCreate
from factory_dashboard.schemas.auth import UserCreate
from factory_dashboard.schemas.factory import FactoryCreate
from factory_dashboard.schemas.inventory import InventoryCreate
from factory_dashboard.schemas.production import ProductionLineCreate
from factory_dashboard.schemas.workforce import WorkforceCreate

logger = logging.getLogger(__name__)

DEMO_FACTORY = "Jaipur Manufacturing Unit"

FACTORIES = [
    ("Jaipur Manufacturing Unit", "Jaipur, Rajasthan"),
    ("Pune Assembly Unit", "Pune, Maharashtra"),
    ("Coimbatore Production", "Coimbatore, Tamil Nadu"),
]

# name, product, target, completed, status; efficiency is derived from completed/target
PRODUCTION_LINES = [
    ("Line 01", "Metal Housings", 1200, 968, "Active"),
    ("Line 02", "Mechanical Parts", 950, 950, "Completed"),
    ("Line 03", "Circuit Boards", 800, 423, "Delayed"),
    ("Line 04", "Electrical Components", 1500, 1280, "Active"),
    ("Line 05", "Assembly", 700, 602, "Active"),
    ("Line 06", "Packaging", 1800, 0, "Maintenance"),
]

# material, current stock, unit, min required, next delivery
INVENTORY = [
    ("Sheet Metal", 1250, "kg", 500, "21 Mar 2023"),
    ("Circuit Components", 3200, "units", 1000, "18 Mar 2023"),
    ("Copper Wire", 85, "kg", 100, "15 Mar 2023"),
    ("Screws & Fasteners", 42, "kg", 25, "27 Mar 2023"),
    ("Plastic Covers", 120, "units", 500, "14 Mar 2023"),
]

# department, total, present, on leave, absent
WORKFORCE = [
    ("Production Floor", 38, 34, 3, 1),
    ("Assembly Lines", 15, 12, 2, 1),
    ("Quality Control", 7, 6, 1, 0),
]

# type, title, message, time label
ALERTS = [
    ("error", "Critical Inventory Alert", "Plastic covers inventory below critical threshold (120/500)", "10 minutes ago"),
    ("warning", "Maintenance Required", "Line 06 requires scheduled maintenance", "45 minutes ago"),
    ("warning", "Low Inventory Warning", "Copper wire stock below minimum threshold (85/100kg)", "1 hour ago"),
    ("info", "Production Target Met", "Line 02 completed daily target of 950 units", "2 hours ago"),
]


# PUBLIC_INTERFACE
async def seed_store(store: Store) -> bool:
    """
    Seed fixture data unless the store already holds factories.

    Returns:
        True when data was written, False when seeding was skipped.
    """
    if await store.factories.list_all():
        logger.info("Store already has factories; skipping seed.")
        return False

    for name, location in FACTORIES:
        await store.factories.create(FactoryCreate(name=name, location=location))

    await store.users.create(
        UserCreate(
            username="sanjay",
            password=get_password_hash("password"),
            name="Sanjay Kumar",
            role="Floor Manager",
            factory=DEMO_FACTORY,
        )
    )

    for name, product, target, completed, status in PRODUCTION_LINES:
        await store.production_lines.create(
            ProductionLineCreate(
                name=name,
                product=product,
                target=target,
                completed=completed,
                status=status,
                factory_id=DEMO_FACTORY,
            )
        )

    for material, current_stock, unit, min_required, next_delivery in INVENTORY:
        await store.inventory.create(
            InventoryCreate(
                material=material,
                current_stock=current_stock,
                unit=unit,
                min_required=min_required,
                next_delivery=next_delivery,
                factory_id=DEMO_FACTORY,
            )
        )

    for department, total, present, on_leave, absent in WORKFORCE:
        await store.workforce.create(
            WorkforceCreate(
                department=department,
                total=total,
                present=present,
                on_leave=on_leave,
                absent=absent,
                factory_id=DEMO_FACTORY,
            )
        )

    for alert_type, title, message, time in ALERTS:
        await store.alerts.create(
            AlertCreate(type=alert_type, title=title, message=message, time=time, factory_id=DEMO_FACTORY)
        )

    logger.info("Seeded fixture data for %s", DEMO_FACTORY)
    return True


async def _main() -> None:
    from factory_dashboard.core.logging import configure_logging
    from factory_dashboard.core.settings import AppSettings
    from factory_dashboard.repositories import build_store

    configure_logging()
    store = build_store(AppSettings(STORAGE_BACKEND="database"))
    try:
        await seed_store(store)
    finally:
        await store.close()


if __name__ == "__main__":
    asyncio.run(_main())
