"""Shared test fixtures.

No test touches the network: the RPC client is replaced by a spec'd mock
whose coroutine methods return canned node responses.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from solders.hash import Hash  # type: ignore[import-untyped]

from config.settings import Settings
from src.chain.rpc import SolanaRpcClient
from tests.helpers import AUTH_TOKEN, new_address


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        main_rpc_url="http://localhost:8899",
        auth_token=AUTH_TOKEN,
        donation_address=new_address(),
        simulate_token_transfers=True,
        simulate_donations=False,
    )


@pytest.fixture
def blockhash() -> str:
    return str(Hash.new_unique())


@pytest.fixture
def rpc(blockhash: str) -> MagicMock:
    """Mocked RPC client: fresh blockhash, no token accounts, clean simulation."""
    client = MagicMock(spec=SolanaRpcClient)
    client.get_latest_blockhash = AsyncMock(return_value=blockhash)
    client.get_token_accounts_by_owner = AsyncMock(return_value=[])
    client.simulate_transaction = AsyncMock(
        return_value={"err": None, "logs": ["Program log: ok"], "unitsConsumed": 4_500}
    )
    client.close = AsyncMock()
    return client
