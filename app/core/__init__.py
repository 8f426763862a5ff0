"""Core: config, lifespan wiring, exception handlers, built-in checklist catalog."""

from app.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
