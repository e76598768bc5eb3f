"""
Core application utilities for settings, errors, logging and FastAPI dependencies.

This package provides:
- Application-level settings (separate from DB settings)
- Domain error types mapped to HTTP status codes
- Dependency helpers (entity store, domain services, session user)
"""
