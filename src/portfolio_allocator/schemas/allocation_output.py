"""
Weight Allocation — Input & Output Schema

Contracts for the allocation engine: the instruments it allocates over, the
monetary options, and the per-instrument amounts it returns. Amounts are
Decimals so that sums and tick multiples are exact.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from portfolio_allocator.config.constants import (
    ALGORITHM_ALIASES,
    DEFAULT_ALGORITHM,
    DEFAULT_MIN_AMOUNT,
    DEFAULT_TICK,
)
from portfolio_allocator.schemas.taxonomy import (
    GROUP_OF_INDUSTRY,
    REGION_OF_COUNTRY,
    SECTOR_OF_INDUSTRY_GROUP,
    Dimension,
    Industry,
    IndustryGroup,
    Region,
    Sector,
    Size,
    Style,
)


class ApportionmentAlgorithm(str, Enum):
    SAINTE_LAGUE = "sainte_lague"
    HARE_NIEMEYER = "hare_niemeyer"


def _to_decimal(v):
    # floats go through str() so 0.1 stays 0.1 instead of its binary expansion
    if isinstance(v, float):
        return Decimal(str(v))
    return v


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

class Instrument(BaseModel):
    """A financial instrument with the attributes its categories derive from."""

    model_config = ConfigDict(frozen=True)

    ticker: str = Field(..., min_length=1)
    name: Optional[str] = Field(None)
    country: Optional[str] = Field(None, description="ISO 3166-1 alpha-2 code")
    industry: Optional[Industry] = Field(None)
    size: Optional[Size] = Field(None)
    style: Optional[Style] = Field(None)

    @field_validator("ticker")
    @classmethod
    def ticker_stripped(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("ticker must not be blank")
        return v

    @field_validator("country")
    @classmethod
    def country_known(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip().upper()
        if v not in REGION_OF_COUNTRY:
            raise ValueError(f"country '{v}' is not in any region")
        return v

    @property
    def region(self) -> Optional[Region]:
        return REGION_OF_COUNTRY[self.country] if self.country else None

    @property
    def industry_group(self) -> Optional[IndustryGroup]:
        return GROUP_OF_INDUSTRY[self.industry] if self.industry else None

    @property
    def sector(self) -> Optional[Sector]:
        group = self.industry_group
        return SECTOR_OF_INDUSTRY_GROUP[group] if group else None


class AllocationOptions(BaseModel):
    """
    Monetary parameters of one allocation.

    Field constraints only cover single values; cross-field rules (tick
    divides total, minimum fits every instrument) are checked by the engine
    so they surface as ConfigurationError subclasses.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_amount: Decimal = Field(..., gt=0, alias="totalAmount")
    min_amount: Decimal = Field(Decimal(DEFAULT_MIN_AMOUNT), ge=0, alias="minAmount")
    tick: Decimal = Field(Decimal(DEFAULT_TICK), gt=0)
    algorithm: ApportionmentAlgorithm = Field(
        ApportionmentAlgorithm(DEFAULT_ALGORITHM),
        validation_alias=AliasChoices("algorithm", "proportionalRepresentationAlgorithm"),
    )

    @field_validator("total_amount", "min_amount", "tick", mode="before")
    @classmethod
    def exact_decimal(cls, v):
        return _to_decimal(v)

    @field_validator("algorithm", mode="before")
    @classmethod
    def resolve_alias(cls, v):
        if isinstance(v, str):
            return ALGORITHM_ALIASES.get(v, v)
        return v

    @property
    def min_weight(self) -> float:
        return float(self.min_amount / self.total_amount)

    @property
    def total_seats(self) -> int:
        """Number of ticks in the total amount (exact when tick divides it)."""
        return int(self.total_amount / self.tick)

    @property
    def min_seats(self) -> int:
        """Minimum amount expressed in whole ticks, rounded up."""
        whole = int(self.min_amount // self.tick)
        return whole + (1 if whole * self.tick < self.min_amount else 0)


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------

class WeightedInstrument(BaseModel):
    """An instrument paired with its allocated amount."""

    ticker: str = Field(..., min_length=1)
    amount: Decimal = Field(..., ge=0)
    instrument: Instrument = Field(...)


class AllocationResult(BaseModel):
    """Allocated amounts in input order plus the residual error of the solve."""

    weighted_instruments: List[WeightedInstrument] = Field(default_factory=list)
    rse: float = Field(..., ge=0.0, description="Residual error; 0 when all constraints are met")

    @model_validator(mode="after")
    def validate_unique_tickers(self) -> "AllocationResult":
        tickers = [w.ticker for w in self.weighted_instruments]
        if len(tickers) != len(set(tickers)):
            raise ValueError("weighted_instruments contains duplicate tickers")
        return self

    def amounts(self) -> Dict[str, Decimal]:
        return {w.ticker: w.amount for w in self.weighted_instruments}

    def total(self) -> Decimal:
        return sum((w.amount for w in self.weighted_instruments), Decimal(0))


class ConstraintProportion(BaseModel):
    """Target vs. achieved proportion for one constraint label."""

    label: str = Field(...)
    dimension: Dimension = Field(...)
    target: float = Field(..., ge=0.0, le=1.0)
    achieved: float = Field(..., ge=0.0, le=1.0)
    member_count: int = Field(..., ge=0)

    @property
    def deviation(self) -> float:
        return self.achieved - self.target


class AllocationReport(BaseModel):
    """Summary of how well an allocation meets its constraints."""

    constraints: List[ConstraintProportion] = Field(default_factory=list)
    distribution: Dict[Dimension, Dict[str, float]] = Field(
        default_factory=dict,
        description="dimension -> label -> achieved proportion, over all labels",
    )
    rse: float = Field(..., ge=0.0)

    @property
    def max_abs_deviation(self) -> float:
        return max((abs(c.deviation) for c in self.constraints), default=0.0)


class AllocationOutput(BaseModel):
    """Top-level pipeline output: the allocation and its proportion report."""

    result: AllocationResult
    report: AllocationReport
    algorithm: ApportionmentAlgorithm
    summary: str = Field(..., min_length=1)
