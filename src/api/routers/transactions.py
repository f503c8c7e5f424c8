"""Transaction builder endpoints — thin wrappers over the function handlers.

The request is converted into the same event envelope the serverless
runtime delivers, so local calls exercise exactly the deployed code path.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request, Response

from src.handlers.donation import handle_donation
from src.handlers.token_transfer import handle_token_transfer

router = APIRouter(prefix="/api/v1", tags=["transactions"])


async def _to_event(request: Request) -> dict[str, Any]:
    raw = await request.body()
    return {
        "body": raw.decode("utf-8", errors="replace"),
        "headers": dict(request.headers),
        "isBase64Encoded": False,
    }


def _to_response(result: dict[str, Any]) -> Response:
    return Response(
        content=result["body"],
        status_code=result["statusCode"],
        headers=result.get("headers"),
    )


@router.post("/token-transfer")
async def token_transfer(request: Request) -> Response:
    """Build an unsigned Token-2022 transfer."""
    settings = request.app.state.settings
    result = await handle_token_transfer(await _to_event(request), settings)
    return _to_response(result)


@router.post("/donation")
async def donation(request: Request) -> Response:
    """Build an unsigned SOL donation (requires Authorization)."""
    settings = request.app.state.settings
    result = await handle_donation(await _to_event(request), settings)
    return _to_response(result)
