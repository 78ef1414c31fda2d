"""
Parking fee calculation.

Time is billed in quarter hours: elapsed milliseconds are rounded up to whole
minutes, minutes are rounded up to quarters, and each quarter costs a quarter
of the hourly rate. Anything at or below zero is billed as one quarter.
"""

import math
from dataclasses import dataclass

HOURLY_RATE = 10
QUARTER_MINUTES = 15
MS_PER_MINUTE = 60 * 1000
QUARTER_RATE = HOURLY_RATE / 4


@dataclass(frozen=True)
class FeeQuote:
    """Elapsed minutes and the charge derived from them."""

    total_minutes: int
    quarters: int
    fee: float


def elapsed_minutes(duration_ms: float) -> int:
    """Whole minutes elapsed, rounded up, never below one."""
    return max(1, math.ceil(duration_ms / MS_PER_MINUTE))


def billable_quarters(duration_ms: float) -> int:
    minutes = math.ceil(duration_ms / MS_PER_MINUTE)
    return max(1, math.ceil(minutes / QUARTER_MINUTES))


def calculate_fee(duration_ms: float) -> float:
    """Charge for a stay of ``duration_ms`` milliseconds."""
    return billable_quarters(duration_ms) * QUARTER_RATE


def quote(duration_ms: float) -> FeeQuote:
    """Compute minutes and fee together for a receipt."""
    quarters = billable_quarters(duration_ms)
    return FeeQuote(
        total_minutes=elapsed_minutes(duration_ms),
        quarters=quarters,
        fee=quarters * QUARTER_RATE,
    )
