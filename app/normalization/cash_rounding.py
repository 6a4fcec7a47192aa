"""Cash payment rounding.

Chilean coinage has no 1 or 5 peso coins in circulation, so cash totals
are rounded to the nearest 10.  A remainder of 1–5 rounds down, 6–9
rounds up.  Card and transfer payments are never rounded; callers decide
which totals go through here.
"""
from __future__ import annotations

import math
from collections.abc import Iterable

DEFAULT_UNIT = 10


def round_cash_payment_amount(amount: float, unit: int = DEFAULT_UNIT) -> int:
    """Return *amount* rounded to a multiple of *unit* for cash payment.

    *amount* is first rounded to a whole peso (halves round up).  A
    remainder up to and including ``unit / 2`` is dropped; anything
    larger is rounded up to the next multiple.
    """
    if unit <= 0:
        raise ValueError(f"unit must be positive, got {unit}")

    whole = math.floor(amount + 0.5)
    remainder = whole % unit  # always non-negative for positive unit

    if remainder == 0:
        return whole
    if remainder * 2 <= unit:
        return whole - remainder
    return whole + (unit - remainder)


def sum_rounded_cash_totals(totals: Iterable[float], unit: int = DEFAULT_UNIT) -> int:
    """Return the sum of *totals*, each rounded with ``round_cash_payment_amount``."""
    return sum(round_cash_payment_amount(total, unit) for total in totals)
