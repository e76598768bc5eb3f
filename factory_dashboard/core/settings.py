from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application-level settings for the FastAPI service.

    This is separate from factory_dashboard.db.config.Settings, which focuses on the
    database connection.
    """

    # FastAPI metadata
    APP_NAME: str = Field(default="Factory Dashboard API")
    APP_DESCRIPTION: str = Field(
        default=(
            "Backend API for the manufacturing operations dashboard. "
            "Serves production, inventory, workforce and alert data per factory."
        )
    )
    APP_VERSION: str = Field(default="0.1.0")

    # CORS
    CORS_ORIGINS: List[str] = Field(
        default_factory=lambda: ["*"],
        description="Comma-separated list or JSON array of allowed origins. Default: *",
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True)
    CORS_ALLOW_METHODS: List[str] = Field(default_factory=lambda: ["*"])
    CORS_ALLOW_HEADERS: List[str] = Field(default_factory=lambda: ["*"])

    # Storage
    STORAGE_BACKEND: Literal["memory", "database"] = Field(
        default="memory",
        description="Entity store implementation: in-process 'memory' or relational 'database'.",
    )

    # Startup behavior
    RUN_MIGRATIONS_ON_STARTUP: bool = Field(
        default=False,
        description="If true and STORAGE_BACKEND=database, run Alembic migrations at app startup.",
    )
    AUTO_SEED: Optional[bool] = Field(
        default=None,
        description="Seed fixture data at startup. Defaults to true for memory, false for database.",
    )

    # Session cookie
    SESSION_SECRET_KEY: str = Field(default="change-me-in-production")
    SESSION_ALGORITHM: str = Field(default="HS256")
    SESSION_EXPIRE_MINUTES: int = Field(default=60 * 12)
    SESSION_COOKIE_NAME: str = Field(default="factory_session")

    # Dashboard policy
    COUNT_COMPLETED_AS_ACTIVE: bool = Field(
        default=True,
        description="Count lines with status Completed as active in the activeLines metric.",
    )

    # Realtime notifier
    REALTIME_ENABLED: bool = Field(
        default=False,
        description="Push update events to WebSocket subscribers after writes.",
    )

    LOG_LEVEL: str = Field(default="INFO")

    # Environment label
    ENVIRONMENT: Optional[str] = Field(
        default=None, description="Environment label (dev/test/prod)"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v):
        """
        Accept both JSON array format and comma-separated formats for CORS origins.
        """
        if v is None:
            return ["*"]
        if isinstance(v, str):
            parts = [p.strip() for p in v.split(",") if p.strip()]
            return parts or ["*"]
        if isinstance(v, list):
            return v or ["*"]
        return ["*"]

    @property
    def should_seed(self) -> bool:
        """Resolve AUTO_SEED against the storage backend default."""
        if self.AUTO_SEED is not None:
            return self.AUTO_SEED
        return self.STORAGE_BACKEND == "memory"


# PUBLIC_INTERFACE
def get_app_settings() -> AppSettings:
    """
    Return a new AppSettings instance populated from environment variables.
    """
    return AppSettings()
