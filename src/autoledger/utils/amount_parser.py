"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation

from autoledger.domain.entities import ZERO


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a two-place Decimal.

    Handles "1234.56", "R1 234.56", "-35.00", "1,234.56" and "(35.00)"
    (negative in parentheses).

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    text = amount_str.strip()
    is_negative = False
    if text.startswith("(") and text.endswith(")"):
        is_negative = True
        text = text[1:-1]

    # Currency markers and thousands separators
    text = re.sub(r"^-?\s*(R|ZAR|\$|€|£)", lambda m: "-" if m.group(0).startswith("-") else "", text)
    text = text.replace(",", "").replace(" ", "")

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if is_negative:
        amount = -amount
    return amount.quantize(ZERO)


def split_signed_amount(amount: Decimal) -> tuple[Decimal, Decimal]:
    """Split a signed amount into (debit_amount, credit_amount).

    Negative amounts are money paid out (debit), positive amounts are money
    received (credit).
    """
    if amount < 0:
        return -amount, ZERO
    return ZERO, amount
