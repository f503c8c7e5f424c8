"""Versioned transaction compilation and wire encoding.

Transactions built here are never signed: every signature slot holds the
default (all-zero) signature and the caller signs before submitting.
"""

from __future__ import annotations

import base64
from collections.abc import Sequence
from dataclasses import dataclass

from solders.hash import Hash  # type: ignore[import-untyped]
from solders.instruction import Instruction  # type: ignore[import-untyped]
from solders.message import MessageV0  # type: ignore[import-untyped]
from solders.pubkey import Pubkey  # type: ignore[import-untyped]
from solders.signature import Signature  # type: ignore[import-untyped]
from solders.transaction import VersionedTransaction  # type: ignore[import-untyped]


@dataclass(frozen=True)
class BuiltTransaction:
    """Serialized unsigned transaction returned to the caller."""

    transaction: str  # base64
    recent_blockhash: str
    instruction_count: int


def compile_unsigned(
    instructions: Sequence[Instruction],
    payer: Pubkey,
    recent_blockhash: str,
) -> VersionedTransaction:
    """Compile instructions into an unsigned v0 transaction with ``payer`` as fee payer."""
    msg = MessageV0.try_compile(
        payer=payer,
        instructions=list(instructions),
        address_lookup_table_accounts=[],
        recent_blockhash=Hash.from_string(recent_blockhash),
    )
    signatures = [Signature.default()] * msg.header.num_required_signatures
    return VersionedTransaction.populate(msg, signatures)


def serialize_b64(tx: VersionedTransaction) -> str:
    return base64.b64encode(bytes(tx)).decode("ascii")


def decode_b64(data: str) -> VersionedTransaction:
    """Decode a base64 wire transaction (inverse of serialize_b64)."""
    return VersionedTransaction.from_bytes(base64.b64decode(data))
