"""Native SOL donation builder — a single system transfer, no account setup."""

from __future__ import annotations

from decimal import Decimal

from loguru import logger
from solders.system_program import TransferParams, transfer  # type: ignore[import-untyped]

from src.chain.exceptions import RpcError, SimulationError
from src.chain.keys import parse_pubkey
from src.chain.rpc import SolanaRpcClient
from src.chain.transactions import BuiltTransaction, compile_unsigned, serialize_b64
from src.chain.units import SOL_DECIMALS, to_base_units


async def build_donation(
    from_address: str,
    to_address: str,
    amount: Decimal | float | str,
    recent_blockhash: str,
    *,
    rpc: SolanaRpcClient | None = None,
    simulate: bool = False,
) -> BuiltTransaction:
    """Build an unsigned SOL transfer of ``amount`` from ``from_address`` to ``to_address``."""
    lamports = to_base_units(amount, SOL_DECIMALS)
    from_pubkey = parse_pubkey(from_address, "from_address")
    to_pubkey = parse_pubkey(to_address, "to_address")

    ix = transfer(TransferParams(from_pubkey=from_pubkey, to_pubkey=to_pubkey, lamports=lamports))
    tx = compile_unsigned([ix], from_pubkey, recent_blockhash)
    tx_b64 = serialize_b64(tx)

    if simulate:
        if rpc is None:
            raise RpcError("simulateTransaction failed: no RPC client")
        result = await rpc.simulate_transaction(tx_b64)
        if result.get("err"):
            logs = result.get("logs") or []
            logger.error(f"[DONATE] Simulation error: {result['err']} logs={logs}")
            raise SimulationError(result["err"], logs)

    logger.debug(f"[DONATE] TX built: {lamports} lamports {from_pubkey} -> {to_pubkey}")
    return BuiltTransaction(transaction=tx_b64, recent_blockhash=recent_blockhash, instruction_count=1)
