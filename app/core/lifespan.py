"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring: logging, telemetry, the checklist registry, and
DB engine dispose.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.application.services import ChecklistRegistry
from app.core.checklists import DEFAULT_DEFINITIONS, DEFAULT_WORKFLOWS
from app.core.config import Settings, get_settings
from app.infrastructure.checklists import (
    load_checklist_config,
    merge_definitions,
    merge_workflows,
)
from app.infrastructure.persistence.database import dispose_engine
from app.shared.telemetry.logging import setup_logging
from app.shared.telemetry.telemetry import TelemetryConfig, get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


def build_checklist_registry(settings: Settings) -> ChecklistRegistry:
    """Return the built-in catalog merged with CHECKLIST_CONFIG_PATH (if set).

    Raises:
        ChecklistConfigurationException: If the file or the merged result is invalid.
    """
    definitions = list(DEFAULT_DEFINITIONS)
    workflows = list(DEFAULT_WORKFLOWS)
    if settings.checklist_config_path:
        extra_definitions, extra_workflows = load_checklist_config(
            settings.checklist_config_path
        )
        definitions = merge_definitions(definitions, extra_definitions)
        workflows = merge_workflows(workflows, extra_workflows)
    registry = ChecklistRegistry(definitions, workflows)
    logger.info(
        "Checklist registry ready: %d checklists for %s",
        len(definitions),
        ", ".join(registry.entity_types()),
    )
    return registry


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, telemetry (if enabled), checklist registry.
    A registry already on app.state (tests) is kept. Shutdown order:
    telemetry shutdown, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        telemetry.instrument_logging()
        telemetry.instrument_fastapi(app)
        set_telemetry(telemetry)
        logger.info("Telemetry initialized")

    if getattr(app.state, "checklist_registry", None) is None:
        app.state.checklist_registry = build_checklist_registry(settings)

    yield

    # ---- Shutdown ----
    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)

    await dispose_engine()
