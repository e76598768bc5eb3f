from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Request

from factory_dashboard.core.logging import factory_var
from factory_dashboard.core.security import get_session_user_id
from factory_dashboard.core.settings import AppSettings
from factory_dashboard.repositories.base import Store
from factory_dashboard.schemas.auth import UserRead
from factory_dashboard.services.accounts import AccountService
from factory_dashboard.services.alerts import AlertService
from factory_dashboard.services.factories import FactoryService
from factory_dashboard.services.inventory import InventoryService
from factory_dashboard.services.production import ProductionService
from factory_dashboard.services.realtime import BroadcastManager
from factory_dashboard.services.workforce import WorkforceService

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def get_settings(request: Request) -> AppSettings:
    """Return the settings the application was created with."""
    return request.app.state.settings


# PUBLIC_INTERFACE
def get_store(request: Request) -> Store:
    """Return the entity store owned by the application."""
    return request.app.state.store


# PUBLIC_INTERFACE
def get_notifier(request: Request) -> BroadcastManager:
    """Return the application's update notifier."""
    return request.app.state.notifier


# PUBLIC_INTERFACE
async def bind_factory(factory_id: str) -> str:
    """
    Path dependency for factory-scoped reads.

    Records the factory name in the logging context and returns it unchanged.
    """
    factory_var.set(factory_id)
    return factory_id


def get_factory_service(
    store: Store = Depends(get_store), notifier: BroadcastManager = Depends(get_notifier)
) -> FactoryService:
    return FactoryService(store, notifier)


def get_account_service(
    store: Store = Depends(get_store), notifier: BroadcastManager = Depends(get_notifier)
) -> AccountService:
    return AccountService(store, notifier)


def get_production_service(
    store: Store = Depends(get_store), notifier: BroadcastManager = Depends(get_notifier)
) -> ProductionService:
    return ProductionService(store, notifier)


def get_inventory_service(
    store: Store = Depends(get_store), notifier: BroadcastManager = Depends(get_notifier)
) -> InventoryService:
    return InventoryService(store, notifier)


def get_workforce_service(
    store: Store = Depends(get_store), notifier: BroadcastManager = Depends(get_notifier)
) -> WorkforceService:
    return WorkforceService(store, notifier)


def get_alert_service(
    store: Store = Depends(get_store), notifier: BroadcastManager = Depends(get_notifier)
) -> AlertService:
    return AlertService(store, notifier)


# PUBLIC_INTERFACE
async def get_current_user(
    request: Request,
    settings: AppSettings = Depends(get_settings),
    accounts: AccountService = Depends(get_account_service),
) -> UserRead:
    """
    Resolve the current user from the session cookie.

    Raises:
        AuthError: no cookie or an invalid/expired session token (401).
        NotFoundError: the session refers to a user that no longer exists (404).
    """
    token: Optional[str] = request.cookies.get(settings.SESSION_COOKIE_NAME)
    user_id = get_session_user_id(token, settings)
    return await accounts.get_session_user(user_id)
