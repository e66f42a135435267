from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

CENT = Decimal("0.01")
ZERO = Decimal(0)


def format_price(amount: Decimal) -> str:
    """Render ``amount`` with exactly two fraction digits ("0.00")."""
    return str(Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP))


def sum_prices(values: Iterable[Decimal]) -> Decimal:
    total = ZERO
    for v in values:
        total = total + v
    return total
