"""Token transfer function — builds an unsigned Token-2022 transfer.

Request:  {"from_address": str, "to_address": str, "amount": str | number}
Response: 200 {"transaction": base64, "recentBlockhash": str}
          400 {"message": str}   bad body or amount
          500 {"error": str}     anything else (RPC, bad address, simulation)
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

from loguru import logger

from config.settings import Settings, settings as default_settings
from src.builders.token_transfer import build_token_transfer
from src.chain.exceptions import InvalidAmountError
from src.chain.rpc import SolanaRpcClient
from src.handlers.http import decode_body, json_response
from src.handlers.schemas import (
    ErrorResponse,
    InvalidRequestError,
    MessageResponse,
    TransactionResponse,
    TransferRequest,
    parse_request,
)
from src.utils.logger import ensure_logger


async def handle_token_transfer(
    event: Mapping[str, Any],
    config: Settings | None = None,
    rpc: SolanaRpcClient | None = None,
) -> dict[str, Any]:
    """Handle one invocation. ``rpc`` is created (and closed) here when not given."""
    config = config or default_settings
    owns_rpc = rpc is None

    try:
        request = parse_request(TransferRequest, decode_body(event))
        logger.info(f"[TOKEN] Mint: {config.token_mint_address}")
        logger.info(f"[TOKEN] From: {request.from_address} To: {request.to_address}")

        if rpc is None:
            rpc = SolanaRpcClient(config.main_rpc_url, timeout=config.rpc_timeout_sec)
        blockhash = await rpc.get_latest_blockhash()

        built = await build_token_transfer(
            rpc,
            request.from_address,
            request.to_address,
            request.amount,
            blockhash,
            config,
            simulate=config.simulate_token_transfers,
        )
        body = TransactionResponse(transaction=built.transaction, recent_blockhash=built.recent_blockhash)
        return json_response(200, body.model_dump(by_alias=True))

    except (InvalidAmountError, InvalidRequestError) as e:
        logger.info(f"[TOKEN] Rejected request: {e}")
        return json_response(400, MessageResponse(message=str(e)).model_dump())
    except Exception as e:
        logger.exception(f"[TOKEN] Error: {e}")
        return json_response(500, ErrorResponse(error=str(e) or type(e).__name__).model_dump())
    finally:
        if owns_rpc and rpc is not None:
            await rpc.close()


def lambda_handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Serverless entry point."""
    ensure_logger(json_logs=default_settings.json_logs, level=default_settings.log_level)
    return asyncio.run(handle_token_transfer(event))
