"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from duo.config import Settings
from duo.interface.api.routes import couple, health, invitations, pairing, profile
from duo.interface.error import register_error_handlers
from duo.util.di.container import create_container, setup_di
from duo.util.observability import instrument_fastapi, instrument_httpx


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    # Outbound email requests
    instrument_httpx()

    app_instance = FastAPI(
        title="Duo API",
        description="Partner pairing and invitations for Couple's Calendar",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:8081",  # Expo web
            "http://localhost:19006",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(profile.router)
    app_instance.include_router(couple.router)
    app_instance.include_router(pairing.router)
    app_instance.include_router(invitations.router)

    return app_instance


# Logfire must be configured before this module is imported (see start_app.py)
app = create_app()
