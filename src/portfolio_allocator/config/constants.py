"""
Centralized configuration for the portfolio allocator

This module defines all magic numbers, tolerances and defaults used by the
allocation engine. Centralizing these values makes it easier to tune the
solver and understand decision boundaries.
"""

# ============================================================================
# DAMPED NNLS SOLVER
# ============================================================================
# The constraint system is stacked with EPSILON * I before solving so that the
# rank-deficient problem gets a unique, balanced solution.

EPSILON = 1e-6
"""Damping factor on the identity block; also the vote resolution for rounding"""

NNLS_MAX_ITER_FACTOR = 3
"""Active-set iteration bound as a multiple of the instrument count"""

NNLS_TOLERANCE_FACTOR = 10
"""Multiplier on machine epsilon * ||A||_1 * max(M, N) for the dual tolerance"""

# ============================================================================
# APPORTIONMENT
# ============================================================================

SAINTE_LAGUE = "sainte_lague"
"""Divisor method with odd divisors 1, 3, 5, ..."""

HARE_NIEMEYER = "hare_niemeyer"
"""Largest-remainder method with the Hare quota"""

DEFAULT_ALGORITHM = SAINTE_LAGUE
"""Apportionment strategy used when the caller does not pick one"""

ALGORITHM_ALIASES = {
    "sainteLague": SAINTE_LAGUE,
    "sainte-lague": SAINTE_LAGUE,
    "hareNiemeyer": HARE_NIEMEYER,
    "hare-niemeyer": HARE_NIEMEYER,
}
"""Alternate spellings accepted for the algorithm option"""

# ============================================================================
# ALLOCATION OPTIONS
# ============================================================================

DEFAULT_TICK = 1
"""Rounding increment when the caller does not specify one"""

DEFAULT_MIN_AMOUNT = 0
"""Minimum amount per instrument when the caller does not specify one"""

PROPORTION_SUM_TOLERANCE = 1e-9
"""Deviation of a dimension's proportion sum from 1 tolerated without a warning"""

RSE_WARNING_TOLERANCE = 1e-9
"""RSE at or below this is floating-point noise, not an unmet constraint"""
