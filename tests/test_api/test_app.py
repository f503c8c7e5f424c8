"""Tests for the local development API wrapping both functions."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from src.api.app import create_app
from tests.helpers import AUTH_TOKEN, new_address


@pytest.fixture
def client(test_settings: Settings) -> TestClient:
    return TestClient(create_app(test_settings))


class TestHealth:
    def test_health(self, client: TestClient, test_settings: Settings) -> None:
        resp = client.get("/api/v1/health")

        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["rpc_url"] == test_settings.main_rpc_url
        assert data["donation_enabled"] is True

    def test_security_headers(self, client: TestClient) -> None:
        resp = client.get("/api/v1/health")
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
        assert resp.headers["Cache-Control"] == "no-store"


class TestTokenTransferRoute:
    def test_passes_through_handler_response(
        self, client: TestClient, rpc: MagicMock, blockhash: str
    ) -> None:
        with patch("src.handlers.token_transfer.SolanaRpcClient", return_value=rpc):
            resp = client.post(
                "/api/v1/token-transfer",
                json={"from_address": new_address(), "to_address": new_address(), "amount": 1},
            )

        assert resp.status_code == 200
        assert resp.json()["recentBlockhash"] == blockhash
        rpc.close.assert_awaited_once()

    def test_invalid_amount(self, client: TestClient) -> None:
        resp = client.post(
            "/api/v1/token-transfer",
            json={"from_address": new_address(), "to_address": new_address(), "amount": -1},
        )

        assert resp.status_code == 400
        assert "Invalid amount" in resp.json()["message"]


class TestDonationRoute:
    def test_requires_authorization(self, client: TestClient) -> None:
        resp = client.post("/api/v1/donation", json={"from_address": new_address(), "amount": 1})
        assert resp.status_code == 403

    def test_authorized(self, client: TestClient, rpc: MagicMock) -> None:
        with patch("src.handlers.donation.SolanaRpcClient", return_value=rpc):
            resp = client.post(
                "/api/v1/donation",
                json={"from_address": new_address(), "amount": "0.01"},
                headers={"Authorization": AUTH_TOKEN},
            )

        assert resp.status_code == 200
        assert resp.json()["transaction"]

    def test_repeated_requests_reach_handler(self, client: TestClient) -> None:
        """The dev server forwards every request; no throttling in front of the handler."""
        statuses = {
            client.post("/api/v1/donation", json={"from_address": new_address(), "amount": 1}).status_code
            for _ in range(40)
        }
        assert statuses == {403}
