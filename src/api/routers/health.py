"""Health check — no auth required."""

from __future__ import annotations

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter(prefix="/api/v1", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    rpc_url: str
    donation_enabled: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Report configuration state. Does not contact the RPC node."""
    settings = request.app.state.settings
    return HealthResponse(
        status="ok",
        version="0.1.0",
        rpc_url=settings.main_rpc_url,
        donation_enabled=bool(settings.auth_token),
    )
