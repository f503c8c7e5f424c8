"""Minimal async Solana JSON-RPC client.

Only the three calls the builders need: latest blockhash, token accounts
by owner, and transaction simulation. Every failure raises RpcError;
there is no retry, the caller decides what to do with the invocation.
"""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from src.chain.exceptions import RpcError


class SolanaRpcClient:
    """Per-invocation JSON-RPC client over httpx."""

    def __init__(self, rpc_url: str, *, timeout: float = 15.0) -> None:
        if not rpc_url:
            raise ValueError("RPC URL is empty")
        self._rpc_url = rpc_url
        self._http = httpx.AsyncClient(timeout=timeout)
        self._request_id = 0

    def __repr__(self) -> str:
        return f"SolanaRpcClient(url={self._rpc_url})"

    async def __aenter__(self) -> SolanaRpcClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _call(self, method: str, params: list[Any]) -> Any:
        """POST a JSON-RPC request and return its ``result`` field."""
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "id": self._request_id,
            "method": method,
            "params": params,
        }
        try:
            resp = await self._http.post(self._rpc_url, json=payload)
        except httpx.HTTPError as e:
            logger.warning(f"[RPC] {method} transport error: {e}")
            raise RpcError(f"{method} failed: {type(e).__name__}: {e}") from e

        if resp.status_code != 200:
            logger.warning(f"[RPC] {method} HTTP {resp.status_code}")
            raise RpcError(f"{method} failed: HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            logger.warning(f"[RPC] {method} returned non-JSON body")
            raise RpcError(f"{method} failed: invalid JSON") from e
        if not isinstance(data, dict):
            raise RpcError(f"{method} failed: invalid JSON-RPC response")

        if "error" in data:
            error = data["error"]
            code = error.get("code", "?") if isinstance(error, dict) else "?"
            msg = error.get("message", str(error)) if isinstance(error, dict) else str(error)
            logger.warning(f"[RPC] {method} RPC error {code}: {msg}")
            raise RpcError(f"{method} failed: RPC error {code}: {msg}")

        if "result" not in data:
            raise RpcError(f"{method} failed: response has no result")
        return data["result"]

    async def get_latest_blockhash(self, commitment: str = "finalized") -> str:
        """Return the latest blockhash as a base58 string."""
        result = await self._call("getLatestBlockhash", [{"commitment": commitment}])
        try:
            return str(result["value"]["blockhash"])
        except (KeyError, TypeError) as e:
            raise RpcError(f"getLatestBlockhash failed: malformed result {result!r}") from e

    async def get_token_accounts_by_owner(self, owner: str, mint: str) -> list[dict[str, Any]]:
        """List token accounts held by ``owner`` for ``mint``.

        Each entry is ``{"pubkey": str, "account": {..., "owner": program_id}}``.
        The node accepts only one of ``mint``/``programId`` as a filter.
        """
        result = await self._call(
            "getTokenAccountsByOwner",
            [owner, {"mint": mint}, {"encoding": "base64", "commitment": "confirmed"}],
        )
        value = result.get("value") if isinstance(result, dict) else None
        if not isinstance(value, list):
            raise RpcError(f"getTokenAccountsByOwner failed: malformed result {result!r}")
        return value

    async def simulate_transaction(self, tx_b64: str) -> dict[str, Any]:
        """Dry-run a base64 transaction without signature verification.

        Returns the ``value`` object: ``{"err": ..., "logs": [...], ...}``.
        """
        result = await self._call(
            "simulateTransaction",
            [
                tx_b64,
                {
                    "encoding": "base64",
                    "sigVerify": False,
                    "commitment": "confirmed",
                },
            ],
        )
        value = result.get("value") if isinstance(result, dict) else None
        if not isinstance(value, dict):
            raise RpcError(f"simulateTransaction failed: malformed result {result!r}")
        return value

    async def close(self) -> None:
        """Close HTTP client."""
        await self._http.aclose()
