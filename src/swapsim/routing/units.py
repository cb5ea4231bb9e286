"""Conversion between human decimal strings and smallest token units."""

import re
from decimal import Decimal
from typing import Union

from swapsim.routing.base import InvalidAmountError

_AMOUNT_RE = re.compile(r"^(?P<whole>[0-9]*)(?:\.(?P<frac>[0-9]*))?$")

MAX_DECIMALS = 77  # 10**77 still fits a uint256


def parse_units(amount: Union[str, Decimal, int], decimals: int) -> int:
    """Convert a decimal amount to an integer count of smallest units.

    Accepts plain decimal notation only ("1", "0.5", ".25", "10.").
    Fractional digits beyond ``decimals`` are allowed only if they are zeros.

    Raises:
        InvalidAmountError: If the amount is negative, malformed or too precise
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise InvalidAmountError(f"Invalid decimals: {decimals!r}")
    if decimals < 0 or decimals > MAX_DECIMALS:
        raise InvalidAmountError(f"Decimals out of range: {decimals}")

    if isinstance(amount, Decimal):
        if not amount.is_finite():
            raise InvalidAmountError(f"Invalid amount: {amount}")
        amount = format(amount, "f")
    text = str(amount).strip()

    if text.startswith("-"):
        raise InvalidAmountError(f"Amount must not be negative: {text}")

    match = _AMOUNT_RE.match(text)
    if not match or not any(ch in "0123456789" for ch in text):
        raise InvalidAmountError(f"Invalid amount: {text!r}")

    whole = match.group("whole") or "0"
    frac = (match.group("frac") or "").rstrip("0")
    if len(frac) > decimals:
        raise InvalidAmountError(
            f"Amount {text} has more than {decimals} decimal places"
        )

    return int(whole) * 10**decimals + int(frac.ljust(decimals, "0") or "0")


def format_units(value: int, decimals: int) -> str:
    """Format an integer count of smallest units as a decimal string.

    Always keeps at least one fractional digit: 1000000 @ 6 -> "1.0".
    """
    sign = "-" if value < 0 else ""
    value = abs(int(value))
    if decimals == 0:
        return f"{sign}{value}.0"

    whole, frac = divmod(value, 10**decimals)
    frac_str = str(frac).rjust(decimals, "0").rstrip("0") or "0"
    return f"{sign}{whole}.{frac_str}"


def format_ether(wei: int) -> str:
    """Format a wei amount as ETH."""
    return format_units(wei, 18)
