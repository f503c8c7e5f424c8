"""Development server — serves both functions over plain HTTP via uvicorn."""

from __future__ import annotations

import uvicorn
from loguru import logger

from config.settings import settings


async def run_dev_server() -> None:
    """Start uvicorn serving the FastAPI app inside the running event loop."""
    from src.api.app import create_app

    app = create_app()
    config = uvicorn.Config(
        app=app,
        host="127.0.0.1",
        port=settings.dev_server_port,
        log_level="warning",
        loop="none",  # use the existing event loop
    )
    server = uvicorn.Server(config)
    logger.info(f"[API] Dev server starting on http://127.0.0.1:{settings.dev_server_port}")
    await server.serve()
