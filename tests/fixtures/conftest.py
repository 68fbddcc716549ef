"""
Shared test data for allocation engine tests.
Provides sample instruments, constraint sets and option mappings.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from portfolio_allocator.schemas.allocation_output import AllocationOptions, Instrument


# Five-stock universe: two regions x three sizes
SAMPLE_INSTRUMENTS: list[dict[str, Any]] = [
    {"ticker": "a", "name": "Alpha Small US", "country": "US", "industry": "Semiconductors", "size": "Small", "style": "Growth"},
    {"ticker": "b", "name": "Beta Small DE", "country": "DE", "industry": "BanksRegional", "size": "Small", "style": "Value"},
    {"ticker": "c", "name": "Gamma Mid US", "country": "US", "industry": "Biotechnology", "size": "Mid", "style": "Blend"},
    {"ticker": "d", "name": "Delta Large US", "country": "US", "industry": "SoftwareApplication", "size": "Large", "style": "Growth"},
    {"ticker": "e", "name": "Epsilon Large DE", "country": "DE", "industry": "OilGasIntegrated", "size": "Large", "style": "Value"},
]

SAMPLE_CONSTRAINTS: dict[str, float] = {
    "NorthAmerica": 0.4,
    "Eurozone": 0.6,
    "Small": 0.2,
    "Mid": 0.3,
    "Large": 0.5,
}

SAMPLE_OPTIONS: dict[str, Any] = {
    "totalAmount": 100,
    "minAmount": 5,
    "tick": 1,
}

# Exact allocation for SAMPLE_CONSTRAINTS with a minimum of 5
EXPECTED_AMOUNTS_MIN_5: dict[str, Decimal] = {
    "a": Decimal(5),
    "b": Decimal(15),
    "c": Decimal(30),
    "d": Decimal(5),
    "e": Decimal(45),
}

# With SAMPLE_CONSTRAINTS: Small has 2 members x 15 > 20 and NorthAmerica 3 x 15 > 40
INFEASIBLE_OPTIONS: dict[str, Any] = {
    "totalAmount": 100,
    "minAmount": 15,
    "tick": 1,
}


def make_instruments(data: list[dict[str, Any]] | None = None) -> list[Instrument]:
    """Build Instrument models from SAMPLE_INSTRUMENTS (or the given dicts)."""
    return [Instrument.model_validate(d) for d in (data or SAMPLE_INSTRUMENTS)]


def make_options(**overrides: Any) -> AllocationOptions:
    """AllocationOptions from SAMPLE_OPTIONS with keyword overrides (camelCase keys)."""
    return AllocationOptions.model_validate({**SAMPLE_OPTIONS, **overrides})
