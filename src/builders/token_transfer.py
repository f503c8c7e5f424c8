"""Token-2022 transfer builder.

Pipeline:
  1. Scale amount to base units (floor)
  2. Resolve source token account (created and funded by the sender if missing)
  3. Resolve destination token account (also funded by the sender)
  4. Transfer instruction under the configured token program
  5. Compile MessageV0 with the sender as fee payer
  6. Simulate, then serialize to base64
"""

from __future__ import annotations

from decimal import Decimal

from loguru import logger
from solders.instruction import Instruction  # type: ignore[import-untyped]
from spl.token.instructions import transfer  # type: ignore[import-untyped]
from spl.token.models import TransferParams  # type: ignore[import-untyped]

from config.settings import Settings
from src.chain.exceptions import SimulationError
from src.chain.keys import parse_pubkey
from src.chain.rpc import SolanaRpcClient
from src.chain.token_accounts import resolve_token_account
from src.chain.transactions import BuiltTransaction, compile_unsigned, serialize_b64
from src.chain.units import to_base_units


async def build_token_transfer(
    rpc: SolanaRpcClient,
    from_address: str,
    to_address: str,
    amount: Decimal | float | str,
    recent_blockhash: str,
    config: Settings,
    *,
    simulate: bool = True,
) -> BuiltTransaction:
    """Build an unsigned transfer of the configured token from ``from_address`` to ``to_address``.

    Raises SimulationError when the node rejects the dry run, RpcError on
    node failures and InvalidAddressError on malformed keys.
    """
    raw_amount = to_base_units(amount, config.token_decimals)
    from_pubkey = parse_pubkey(from_address, "from_address")
    program_id = parse_pubkey(config.token_program_id, "token_program_id")
    mint = config.token_mint_address

    source = await resolve_token_account(
        rpc, from_address, mint, from_pubkey, program_id, field="from_address"
    )
    dest = await resolve_token_account(
        rpc, to_address, mint, from_pubkey, program_id, field="to_address"
    )

    logger.info(f"[TOKEN] Source token account: {source.address} (exists={source.exists})")
    logger.info(f"[TOKEN] Destination token account: {dest.address} (exists={dest.exists})")

    instructions: list[Instruction] = []
    if source.create_instruction is not None:
        instructions.append(source.create_instruction)
    if dest.create_instruction is not None:
        instructions.append(dest.create_instruction)
    instructions.append(
        transfer(
            TransferParams(
                program_id=program_id,
                source=source.address,
                dest=dest.address,
                owner=from_pubkey,
                amount=raw_amount,
            )
        )
    )

    tx = compile_unsigned(instructions, from_pubkey, recent_blockhash)
    tx_b64 = serialize_b64(tx)

    if simulate:
        result = await rpc.simulate_transaction(tx_b64)
        if result.get("err"):
            logs = result.get("logs") or []
            logger.error(f"[TOKEN] Simulation error: {result['err']} logs={logs}")
            raise SimulationError(result["err"], logs)

    logger.debug(
        f"[TOKEN] TX built: {len(instructions)} instructions, "
        f"amount={raw_amount}, blockhash={recent_blockhash[:16]}..."
    )
    return BuiltTransaction(
        transaction=tx_b64,
        recent_blockhash=recent_blockhash,
        instruction_count=len(instructions),
    )
