"""
Allocation Tool: Portfolio Assembler

Pure functions for:
- Converting solved excess weights into integer votes at EPSILON resolution
- Repairing apportioned seats that fall below the per-instrument minimum
- Turning seats back into monetary amounts (seats x tick)

No LLM, no file I/O.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Sequence

import numpy as np

from portfolio_allocator.config.constants import EPSILON
from portfolio_allocator.exceptions import MinimumAmountError, NumericalError
from portfolio_allocator.schemas.allocation_output import (
    AllocationResult,
    Instrument,
    WeightedInstrument,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pure Functions
# ---------------------------------------------------------------------------

def compute_votes(
    x: np.ndarray,
    min_weight: float,
    epsilon: float = EPSILON,
) -> List[int]:
    """
    votes_j = round((x_j + min_weight) / epsilon), halves rounded up.

    Raises NumericalError if any weight is not finite.
    """
    weights = np.asarray(x, dtype=np.float64) + min_weight
    if not np.isfinite(weights).all():
        raise NumericalError("Solved weights contain NaN or infinite values")
    votes = np.floor(weights / epsilon + 0.5)
    return [max(int(v), 0) for v in votes]


def enforce_minimum(seats: Sequence[int], min_seats: int) -> List[int]:
    """
    Lift every instrument to at least ``min_seats`` seats, preserving the sum.

    Deficient instruments are filled earliest first; each missing seat is
    taken from the instrument with the most seats above the floor, the
    earliest one on ties. Returns the input unchanged when nothing is short.

    Raises MinimumAmountError if the seats cannot cover the floor at all.
    """
    repaired = list(seats)
    if min_seats <= 0 or all(s >= min_seats for s in repaired):
        return repaired
    if min_seats * len(repaired) > sum(repaired):
        raise MinimumAmountError(
            f"{sum(repaired)} seats cannot give {len(repaired)} instruments "
            f"{min_seats} seats each"
        )

    moved = 0
    for i in range(len(repaired)):
        while repaired[i] < min_seats:
            donor = max(range(len(repaired)), key=lambda j: (repaired[j], -j))
            repaired[donor] -= 1
            repaired[i] += 1
            moved += 1

    logger.warning(f"Moved {moved} seats to lift instruments to the minimum of {min_seats}")
    return repaired


def assemble(
    instruments: Sequence[Instrument],
    seats: Sequence[int],
    tick: Decimal,
    rse: float,
) -> AllocationResult:
    """Pair each instrument with amount = seats x tick, in input order."""
    if len(instruments) != len(seats):
        raise NumericalError(
            f"Got {len(seats)} seat counts for {len(instruments)} instruments"
        )
    tick = Decimal(tick)
    weighted = [
        WeightedInstrument(ticker=inst.ticker, amount=count * tick, instrument=inst)
        for inst, count in zip(instruments, seats)
    ]
    return AllocationResult(weighted_instruments=weighted, rse=rse)
