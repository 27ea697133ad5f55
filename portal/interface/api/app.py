"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portal.config import Settings
from portal.interface.api.routes import (
    accounts,
    comments,
    content,
    health,
    ranks,
    reactions,
)
from portal.util.di.container import create_container, setup_di
from portal.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; in
    production start_app.py does it.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Class Portal API",
        description="Reputation API for the class-resource portal: reactions, comments, points and ranks",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    # Settings are loaded from environment by the container
    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(reactions.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(content.router)
    app_instance.include_router(accounts.router)
    app_instance.include_router(ranks.router)

    return app_instance


# App instance for uvicorn; Logfire must be configured before import
app = create_app()
