from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, List, Optional
from uuid import uuid4

from fastapi import APIRouter, FastAPI, Request, WebSocket, WebSocketDisconnect
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from factory_dashboard.core.errors import DashboardError
from factory_dashboard.core.logging import configure_logging, correlation_id_var, factory_var
from factory_dashboard.core.settings import AppSettings, get_app_settings
from factory_dashboard.db.seed import seed_store
from factory_dashboard.repositories import Store, build_store
from factory_dashboard.schemas.common import ErrorInfo, ErrorResponse, MessageResponse
from factory_dashboard.services.realtime import BroadcastManager

# Routers
from factory_dashboard.api.routes.alerts import router as alerts_router
from factory_dashboard.api.routes.auth import router as auth_router
from factory_dashboard.api.routes.dashboard import router as dashboard_router
from factory_dashboard.api.routes.factories import router as factories_router
from factory_dashboard.api.routes.inventory import router as inventory_router
from factory_dashboard.api.routes.production import router as production_router
from factory_dashboard.api.routes.users import router as users_router
from factory_dashboard.api.routes.workforce import router as workforce_router

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "Health", "description": "Liveness probe."},
    {"name": "Auth", "description": "Cookie session login, logout and current user."},
    {"name": "Users", "description": "User accounts."},
    {"name": "Factories", "description": "Factory sites; factory names scope every other record."},
    {"name": "Dashboard", "description": "Per-factory KPI summary."},
    {"name": "Production", "description": "Production lines, output and efficiency."},
    {"name": "Inventory", "description": "Material stock and adequacy status."},
    {"name": "Workforce", "description": "Department attendance."},
    {"name": "Alerts", "description": "Factory alerts."},
]


def _build_error_response(
    request: Request,
    status_code: int,
    error_type: str,
    message: str,
    details: Any | None = None,
) -> JSONResponse:
    """Build a standardized ErrorResponse JSONResponse."""
    err = ErrorResponse(
        status=status_code,
        message=message,
        error=ErrorInfo(type=error_type, message=message, details=details),
        correlation_id=getattr(request.state, "correlation_id", None),
        path=request.url.path,
        method=request.method,
        timestamp=datetime.now(tz=timezone.utc),
    )
    return JSONResponse(status_code=status_code, content=err.model_dump(mode="json"))


def _describe_validation_errors(errors: List[dict]) -> str:
    """Summarize pydantic errors as 'field: cause' pairs; 'body' prefixes are dropped."""
    parts = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Request validation failed"


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(DashboardError)
    async def dashboard_error_handler(request: Request, exc: DashboardError):
        """
        Map domain errors to their HTTP status with the standard error envelope.
        """
        if exc.status_code >= 500:
            logger.error("Request failed: %s", exc.message)
        return _build_error_response(
            request=request,
            status_code=exc.status_code,
            error_type=exc.error_type,
            message=exc.message,
            details=exc.details,
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """
        Global handler for HTTPException to produce a standardized error envelope.
        """
        detail = exc.detail if isinstance(exc.detail, str) else "HTTP Error"
        return _build_error_response(
            request=request,
            status_code=exc.status_code,
            error_type="http_error",
            message=str(detail),
            details=None if isinstance(exc.detail, str) else exc.detail,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """
        Malformed request bodies and parameters are client errors (400) with field-level details.
        """
        errors = exc.errors()
        return _build_error_response(
            request=request,
            status_code=400,
            error_type="validation_error",
            message=_describe_validation_errors(errors),
            details=jsonable_encoder(errors),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """
        Catch-all handler to avoid leaking stack traces and to return a structured error.
        """
        logger.exception("Unhandled error processing request")
        return _build_error_response(
            request=request,
            status_code=500,
            error_type="internal_error",
            message="An unexpected error occurred",
            details=None,
        )


# PUBLIC_INTERFACE
def create_app(settings: Optional[AppSettings] = None, store: Optional[Store] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Parameters:
        settings: application settings; read from the environment when omitted
        store: entity store; built from STORAGE_BACKEND when omitted
    Returns:
        FastAPI app with the store, settings and notifier attached to app.state.
    """
    settings = settings or get_app_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        openapi_tags=openapi_tags,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else build_store(settings)
    app.state.notifier = BroadcastManager(enabled=settings.REALTIME_ENABLED)
    if not settings.REALTIME_ENABLED:
        logger.info("Update broadcast disabled")

    # CORS - avoid wildcard with credentials
    cors_allow_credentials = settings.CORS_ALLOW_CREDENTIALS
    if settings.CORS_ORIGINS == ["*"] and cors_allow_credentials:
        logger.warning("CORS_ALLOW_CREDENTIALS=True with '*' origins is not permitted; disabling credentials.")
        cors_allow_credentials = False

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=cors_allow_credentials,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        """
        Enrich request context with a correlation_id for logging and error responses.
        Adds 'X-Correlation-ID' to every response.
        """
        corr = request.headers.get("X-Correlation-ID") or request.headers.get("X-Request-ID") or str(uuid4())
        token_corr = correlation_id_var.set(corr)
        token_factory = factory_var.set(None)
        request.state.correlation_id = corr

        logger.info("Incoming request %s %s", request.method, request.url.path)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token_corr)
            factory_var.reset(token_factory)

        response.headers["X-Correlation-ID"] = corr
        return response

    _register_exception_handlers(app)

    @app.on_event("startup")
    async def on_startup() -> None:
        """
        Run migrations and optional seeding on service startup.
        """
        if settings.STORAGE_BACKEND == "database" and settings.RUN_MIGRATIONS_ON_STARTUP:
            from factory_dashboard.db.run_migrations import main as run_alembic

            logger.info("Running Alembic migrations: upgrade head")
            # env.py drives its own event loop, so it cannot run on this one.
            await asyncio.to_thread(run_alembic, ["upgrade", "head"])
            logger.info("Migrations completed.")

        if settings.should_seed:
            logger.info("Seeding fixture data...")
            await seed_store(app.state.store)

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        await app.state.store.close()

    api = APIRouter(prefix="/api")

    # PUBLIC_INTERFACE
    @api.get(
        "/health",
        response_model=MessageResponse,
        summary="Health Check",
        tags=["Health"],
    )
    def health_check() -> MessageResponse:
        """
        Basic liveness health check endpoint.

        Returns:
            MessageResponse: Simple confirmation that the service is running.
        """
        return MessageResponse(message="Healthy")

    api.include_router(factories_router)
    api.include_router(users_router)
    api.include_router(auth_router)
    api.include_router(dashboard_router)
    api.include_router(production_router)
    api.include_router(inventory_router)
    api.include_router(workforce_router)
    api.include_router(alerts_router)
    app.include_router(api)

    # PUBLIC_INTERFACE
    @app.websocket("/ws/updates/{factory_id}")
    async def ws_updates(websocket: WebSocket, factory_id: str):
        """
        WebSocket endpoint for factory update events.

        Messages:
          - Server -> Client: {topic, data, at} where topic is production_updated,
            inventory_updated, workforce_updated, alert_created or alert_updated.
          - Client -> Server: optional 'ping' to keepalive; other messages ignored.
        Nothing is pushed while REALTIME_ENABLED is false.
        """
        notifier: BroadcastManager = app.state.notifier
        await websocket.accept()
        topic = notifier.updates_topic(factory_id)
        await notifier.connect(topic, websocket)
        try:
            while True:
                msg = await websocket.receive_text()
                if msg and msg.lower() == "ping":
                    await websocket.send_text("pong")
        except WebSocketDisconnect:
            await notifier.disconnect(topic, websocket)
        except Exception:
            logger.exception("Error on ws_updates connection")
            await notifier.disconnect(topic, websocket)
            await websocket.close()

    return app


app = create_app()
