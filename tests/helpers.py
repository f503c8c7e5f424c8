"""Addresses and canned RPC entries shared by test modules."""

from __future__ import annotations

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

TOKEN_2022 = "TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb"
AUTH_TOKEN = "test-shared-secret"


def new_address() -> str:
    return str(Pubkey.new_unique())


def token_account_entry(program_id: str = TOKEN_2022) -> dict:
    """Shape of one getTokenAccountsByOwner result entry."""
    return {
        "pubkey": new_address(),
        "account": {"owner": program_id, "lamports": 2_039_280, "executable": False},
    }
