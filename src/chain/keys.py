"""Address parsing shared by both transaction builders."""

from __future__ import annotations

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from src.chain.exceptions import InvalidAddressError


def parse_pubkey(value: str, field: str = "address") -> Pubkey:
    """Parse a base58 public key, naming the offending field on failure."""
    if not isinstance(value, str) or not value:
        raise InvalidAddressError(f"Invalid {field}: empty or not a string")
    try:
        return Pubkey.from_string(value)
    except ValueError as e:
        raise InvalidAddressError(f"Invalid {field} '{value}': {e}") from e
