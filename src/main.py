"""Entry point for the local development server."""

import asyncio

from loguru import logger

from config.settings import settings
from src.api.server import run_dev_server
from src.utils.logger import setup_logger


async def main() -> None:
    setup_logger(json_logs=settings.json_logs, level=settings.log_level)
    logger.info("Starting transaction builder dev server...")
    logger.info(f"[API] RPC endpoint: {settings.main_rpc_url}")
    await run_dev_server()


if __name__ == "__main__":
    asyncio.run(main())
