"""ASGI entry point: `uvicorn app.main:app`.

create_app() only wires things together (lifespan, error handlers,
middleware, the v1 router). Settings are read when it is called, so tests
can adjust the environment and clear the get_settings cache first.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.router import api_router
from app.core.config import Settings, get_settings
from app.core.exception_handlers import register_exception_handlers
from app.core.lifespan import create_lifespan
from app.middleware import RequestIDMiddleware

API_PREFIX = "/api/v1"


def _install_middleware(app: FastAPI, settings: Settings) -> None:
    # Added last runs first: the request id is bound before CORS handles preflights.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH"],
        allow_headers=["*"],
        expose_headers=[settings.request_id_header],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)


def create_app() -> FastAPI:
    """Return the configured checklist gate application."""
    settings = get_settings()
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Checklist completion and status transition gating",
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    register_exception_handlers(application)
    _install_middleware(application, settings)
    application.include_router(api_router, prefix=API_PREFIX)
    return application


app = create_app()
