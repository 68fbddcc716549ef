"""
Allocation Tool: Apportionment Rounder
Turns non-negative integer votes into integer seat counts that sum exactly
to the requested number of seats.

Two proportional-representation methods:
- Sainte-Laguë: highest quotient v / (2s + 1), ties to the earlier entry
- Hare-Niemeyer: Hare quota floors, remaining seats by largest remainder

All comparisons are exact (integers and Fractions), so results never depend
on floating-point noise.

No LLM, no file I/O.
"""

from __future__ import annotations

import heapq
import logging
import numbers
from fractions import Fraction
from typing import Dict, List, Mapping, Sequence, Union

from portfolio_allocator.config.constants import ALGORITHM_ALIASES
from portfolio_allocator.exceptions import ConfigurationError
from portfolio_allocator.schemas.allocation_output import ApportionmentAlgorithm

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Input checks
# ---------------------------------------------------------------------------

def _as_count(value, what: str) -> int:
    """Coerce an integral, non-negative number (int, numpy int, 3.0) to int."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f"{what} must be a non-negative integer, got {value!r}")
    if value != int(value) or value < 0:
        raise ConfigurationError(f"{what} must be a non-negative integer, got {value!r}")
    return int(value)


def _even_split(n: int, seats: int) -> List[int]:
    base, extra = divmod(seats, n)
    return [base + (1 if i < extra else 0) for i in range(n)]


# ---------------------------------------------------------------------------
# Pure Functions
# ---------------------------------------------------------------------------

def sainte_lague(votes: Sequence[int], seats: int) -> List[int]:
    """
    Sainte-Laguë (Webster) apportionment.

    Seats go one at a time to the entry with the highest quotient
    v / (2s + 1), where s is the entry's current seat count. Equal quotients
    go to the entry that comes first.

    Every seat whose quotient exceeds V / (2S - n) is certain to be awarded
    (at most S of them exist), so those are granted in bulk before the
    heap takes over.
    """
    n = len(votes)
    total_votes = sum(votes)
    if n == 0 or seats == 0:
        return [0] * n
    if total_votes == 0:
        return _even_split(n, seats)

    awarded = [0] * n
    scale = 2 * seats - n
    if scale > 0:
        for i, v in enumerate(votes):
            w = v * scale
            if w > 0:
                # odd divisors m with m * V < v * (2S - n)
                awarded[i] = (((w - 1) // total_votes) + 1) // 2

    remaining = seats - sum(awarded)
    heap = [(-Fraction(v, 2 * awarded[i] + 1), i) for i, v in enumerate(votes)]
    heapq.heapify(heap)
    for _ in range(remaining):
        _, i = heapq.heappop(heap)
        awarded[i] += 1
        heapq.heappush(heap, (-Fraction(votes[i], 2 * awarded[i] + 1), i))

    return awarded


def hare_niemeyer(votes: Sequence[int], seats: int) -> List[int]:
    """
    Hare-Niemeyer (largest remainder) apportionment.

    Each entry first receives floor(S * v / V) seats; the seats left over go
    to the largest remainders, earlier entries first on equal remainders.
    """
    n = len(votes)
    total_votes = sum(votes)
    if n == 0 or seats == 0:
        return [0] * n
    if total_votes == 0:
        return _even_split(n, seats)

    awarded = []
    remainders = []
    for v in votes:
        whole, rest = divmod(seats * v, total_votes)
        awarded.append(whole)
        remainders.append(rest)

    remaining = seats - sum(awarded)
    order = sorted(range(n), key=lambda i: (-remainders[i], i))
    for i in order[:remaining]:
        awarded[i] += 1

    return awarded


_METHODS = {
    ApportionmentAlgorithm.SAINTE_LAGUE: sainte_lague,
    ApportionmentAlgorithm.HARE_NIEMEYER: hare_niemeyer,
}


def apportion(
    votes: Mapping[str, int],
    seats: int,
    algorithm: Union[str, ApportionmentAlgorithm] = ApportionmentAlgorithm.SAINTE_LAGUE,
) -> Dict[str, int]:
    """
    Apportion seats among the keys of ``votes``.

    Args:
        votes: Instrument id -> non-negative integer votes, in input order.
        seats: Non-negative number of seats to hand out.
        algorithm: "sainte_lague" or "hare_niemeyer".

    Returns:
        Instrument id -> seats, same order as ``votes``, summing to ``seats``.

    Raises:
        ConfigurationError: negative or fractional votes/seats, an unknown
            algorithm, or seats to distribute among no instruments.
    """
    seats = _as_count(seats, "seats")
    keys = list(votes)
    counts = [_as_count(votes[k], f"votes for '{k}'") for k in keys]

    if isinstance(algorithm, str):
        algorithm = ALGORITHM_ALIASES.get(algorithm, algorithm)
    try:
        algorithm = ApportionmentAlgorithm(algorithm)
    except ValueError:
        raise ConfigurationError(f"Unknown apportionment algorithm: {algorithm!r}") from None
    method = _METHODS[algorithm]

    if not keys:
        if seats > 0:
            raise ConfigurationError(f"Cannot distribute {seats} seats among no instruments")
        return {}

    if sum(counts) == 0 and seats > 0:
        logger.warning(
            f"All {len(keys)} instruments have zero votes; "
            f"splitting {seats} seats evenly in input order"
        )

    awarded = method(counts, seats)
    logger.debug(
        f"Apportioned {seats} seats over {len(keys)} instruments "
        f"({sum(counts)} votes) with {algorithm.value}"
    )
    return dict(zip(keys, awarded))
