from __future__ import annotations

from typing import Union

from .cycle import get_cycle_type


def to_amount(value: Union[int, float, str, None]) -> int:
    """Coerce a stored fee to whole VND; unparseable values count as 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return 0


def format_currency(amount: Union[int, float, str, None]) -> str:
    """1500000 -> '1.500.000 VND' (vi-VN grouping, no decimals)."""
    value = to_amount(amount)
    grouped = f"{abs(value):,}".replace(",", ".")
    sign = "-" if value < 0 else ""
    return f"{sign}{grouped} VND"


def format_payment_cycle(code: str) -> str:
    ct = get_cycle_type(code)
    return ct.label if ct else code
