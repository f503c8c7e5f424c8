"""Amount parsing and base-unit conversion.

Amounts arrive as JSON numbers or decimal strings. They are parsed into
Decimal so that scaling by 10^decimals is exact, then floored:
fractional base units are truncated, never rounded.
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal, InvalidOperation, Overflow, localcontext

from src.chain.exceptions import InvalidAmountError

LAMPORTS_PER_SOL = 1_000_000_000
SOL_DECIMALS = 9
MAX_BASE_UNITS = 2**64 - 1  # u64 amount field of transfer instructions


def parse_amount(raw: object) -> Decimal:
    """Parse a request amount into a positive finite Decimal.

    Raises InvalidAmountError for booleans, non-numeric strings, NaN,
    infinities and values <= 0.
    """
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str, Decimal)):
        raise InvalidAmountError("Invalid amount. Must be a positive number.")
    try:
        # str() first so floats keep their shortest repr (1.1 -> "1.1")
        value = Decimal(str(raw).strip())
    except InvalidOperation as e:
        raise InvalidAmountError("Invalid amount. Must be a positive number.") from e

    if not value.is_finite() or value <= 0:
        raise InvalidAmountError("Invalid amount. Must be a positive number.")
    return value


def to_base_units(amount: Decimal | int | float | str, decimals: int = SOL_DECIMALS) -> int:
    """Scale a positive amount to integer base units: floor(amount * 10^decimals).

    Raises InvalidAmountError when the result does not fit in a u64.
    """
    value = parse_amount(amount)
    if value.adjusted() + decimals >= 20:
        raise InvalidAmountError("Invalid amount. Too large.")
    try:
        with localcontext() as ctx:
            # enough precision that scaleb never rounds before the floor
            ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + decimals + 1)
            units = int(value.scaleb(decimals).to_integral_value(rounding=ROUND_FLOOR))
    except (Overflow, InvalidOperation) as e:
        raise InvalidAmountError("Invalid amount. Too large.") from e
    if units > MAX_BASE_UNITS:
        raise InvalidAmountError("Invalid amount. Too large.")
    return units
