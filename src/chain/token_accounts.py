"""Token account resolution — find an existing account or plan its creation."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger
from solders.instruction import Instruction  # type: ignore[import-untyped]
from solders.pubkey import Pubkey  # type: ignore[import-untyped]
from spl.token.instructions import (  # type: ignore[import-untyped]
    create_associated_token_account,
    get_associated_token_address,
)

from src.chain.keys import parse_pubkey
from src.chain.rpc import SolanaRpcClient


@dataclass(frozen=True)
class TokenAccountResolution:
    """Address usable as the token account, plus the instruction creating it if missing."""

    address: Pubkey
    create_instruction: Instruction | None = None

    @property
    def exists(self) -> bool:
        return self.create_instruction is None


def derive_token_account(owner: Pubkey, mint: Pubkey, program_id: Pubkey) -> Pubkey:
    """Derive the associated token account for (owner, mint) under ``program_id``."""
    return get_associated_token_address(owner, mint, token_program_id=program_id)


async def resolve_token_account(
    rpc: SolanaRpcClient,
    owner: str,
    mint: str,
    payer: Pubkey,
    program_id: Pubkey,
    *,
    field: str = "owner",
) -> TokenAccountResolution:
    """Resolve the token account of ``owner`` for ``mint``.

    Returns the first account the node reports (owned by ``program_id``)
    without an instruction. When none exists, returns the derived
    associated address and the instruction that creates it, funded by
    ``payer``. Nothing is appended anywhere; the caller decides.
    """
    owner_pubkey = parse_pubkey(owner, field)
    mint_pubkey = parse_pubkey(mint, "mint")

    accounts = await rpc.get_token_accounts_by_owner(str(owner_pubkey), str(mint_pubkey))
    program_str = str(program_id)
    matching = [
        a for a in accounts
        if a.get("account", {}).get("owner", program_str) == program_str
    ]

    if matching:
        return TokenAccountResolution(address=Pubkey.from_string(matching[0]["pubkey"]))

    address = derive_token_account(owner_pubkey, mint_pubkey, program_id)
    logger.debug(f"[TOKEN] No token account for {owner_pubkey}, will create {address}")
    return TokenAccountResolution(
        address=address,
        create_instruction=create_associated_token_account(
            payer, owner_pubkey, mint_pubkey, token_program_id=program_id
        ),
    )
