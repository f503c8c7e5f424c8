"""FastAPI application factory for local development of the functions."""

from __future__ import annotations

import os

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from config.settings import Settings, settings as default_settings
from src.api.middleware import SecurityHeadersMiddleware


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    app = FastAPI(
        title="Transaction Builder API",
        version="0.1.0",
        docs_url="/api/docs" if os.getenv("API_DEBUG") else None,
        redoc_url=None,
        openapi_url="/api/openapi.json" if os.getenv("API_DEBUG") else None,
    )
    app.state.settings = settings or default_settings

    # Security headers
    app.add_middleware(SecurityHeadersMiddleware)

    # CORS — wallet frontends call from the browser during development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173", "http://localhost:3000"],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Authorization", "Content-Type"],
    )

    from src.api.routers.health import router as health_router
    from src.api.routers.transactions import router as transactions_router

    app.include_router(health_router)
    app.include_router(transactions_router)

    return app
