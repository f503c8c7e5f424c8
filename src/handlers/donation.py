"""SOL donation function — builds an unsigned transfer to the donation address.

Requires ``Authorization`` (any header case) equal to AUTH_TOKEN.
Request:  {"from_address": str, "amount": str | number}
Response: 200 {"transaction": base64, "recentBlockhash": str}
          400 {"message": str}
          403 {"message": "Unauthorized"}
          500 {"error": str}
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

from loguru import logger

from config.settings import Settings, settings as default_settings
from src.builders.donation import build_donation
from src.chain.exceptions import InvalidAmountError
from src.chain.rpc import SolanaRpcClient
from src.handlers.http import decode_body, get_header, json_response, verify_shared_secret
from src.handlers.schemas import (
    DonationRequest,
    ErrorResponse,
    InvalidRequestError,
    MessageResponse,
    TransactionResponse,
    parse_request,
)
from src.utils.logger import ensure_logger


async def handle_donation(
    event: Mapping[str, Any],
    config: Settings | None = None,
    rpc: SolanaRpcClient | None = None,
) -> dict[str, Any]:
    """Handle one invocation. No RPC call is made before authorization passes."""
    config = config or default_settings
    owns_rpc = rpc is None

    try:
        authorization = get_header(event.get("headers"), "Authorization")
        if not verify_shared_secret(authorization, config.auth_token):
            # Never log or echo the header value
            logger.warning(f"[DONATE] Unauthorized request (header present={authorization is not None})")
            return json_response(403, MessageResponse(message="Unauthorized").model_dump())

        request = parse_request(DonationRequest, decode_body(event))
        logger.info(f"[DONATE] From: {request.from_address} amount={request.amount}")

        if rpc is None:
            rpc = SolanaRpcClient(config.main_rpc_url, timeout=config.rpc_timeout_sec)
        blockhash = await rpc.get_latest_blockhash()

        built = await build_donation(
            request.from_address,
            config.donation_address,
            request.amount,
            blockhash,
            rpc=rpc,
            simulate=config.simulate_donations,
        )
        body = TransactionResponse(transaction=built.transaction, recent_blockhash=built.recent_blockhash)
        return json_response(200, body.model_dump(by_alias=True))

    except (InvalidAmountError, InvalidRequestError) as e:
        logger.info(f"[DONATE] Rejected request: {e}")
        return json_response(400, MessageResponse(message=str(e)).model_dump())
    except Exception as e:
        logger.exception(f"[DONATE] Error: {e}")
        return json_response(500, ErrorResponse(error=str(e) or type(e).__name__).model_dump())
    finally:
        if owns_rpc and rpc is not None:
            await rpc.close()


def lambda_handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Serverless entry point."""
    ensure_logger(json_logs=default_settings.json_logs, level=default_settings.log_level)
    return asyncio.run(handle_donation(event))
