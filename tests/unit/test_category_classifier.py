"""
Category Classifier — Membership Tests
Level 1: Pure function tests, no LLM calls, no file I/O.

Tests instrument membership in region, sector, size and style labels, plus
the eligible-label and minimum-proportion helpers.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from portfolio_allocator.exceptions import UnknownCategoryError
from portfolio_allocator.schemas.allocation_output import Instrument
from portfolio_allocator.schemas.taxonomy import Dimension, Region, Sector, Size, Style
from portfolio_allocator.tools.category_classifier import (
    belongs_to,
    category_of,
    eligible_labels,
    minimum_proportions,
)
from tests.fixtures.conftest import make_instruments


def _make_instrument(**kwargs) -> Instrument:
    data = {"ticker": "X"}
    data.update(kwargs)
    return Instrument.model_validate(data)


# ---------------------------------------------------------------------------
# TestInstrumentSchema
# ---------------------------------------------------------------------------

@pytest.mark.schema
class TestInstrumentSchema:

    def test_derived_region_and_sector(self):
        inst = _make_instrument(country="us", industry="Semiconductors")
        assert inst.country == "US"
        assert inst.region is Region.NORTH_AMERICA
        assert inst.sector is Sector.TECHNOLOGY

    def test_missing_attributes(self):
        inst = _make_instrument()
        assert inst.region is None
        assert inst.industry_group is None
        assert inst.sector is None

    def test_unknown_country_rejected(self):
        with pytest.raises(ValidationError):
            _make_instrument(country="ZZ")

    def test_blank_ticker_rejected(self):
        with pytest.raises(ValidationError):
            _make_instrument(ticker="   ")

    def test_unknown_industry_rejected(self):
        with pytest.raises(ValidationError):
            _make_instrument(industry="Alchemy")


# ---------------------------------------------------------------------------
# TestBelongsTo
# ---------------------------------------------------------------------------

@pytest.mark.schema
class TestBelongsTo:

    def test_region_membership(self):
        inst = _make_instrument(country="DE")
        assert belongs_to(inst, "Eurozone")
        assert not belongs_to(inst, "NorthAmerica")

    def test_sector_membership_via_industry(self):
        inst = _make_instrument(industry="Biotechnology")
        assert belongs_to(inst, Sector.HEALTHCARE)
        assert not belongs_to(inst, "Technology")

    def test_size_and_style(self):
        inst = _make_instrument(size="Large", style="Value")
        assert belongs_to(inst, "Large")
        assert belongs_to(inst, Style.VALUE)
        assert not belongs_to(inst, "Small")
        assert not belongs_to(inst, "Growth")

    def test_missing_attribute_belongs_to_nothing(self):
        inst = _make_instrument()
        for label in ("NorthAmerica", "Technology", "Small", "Blend"):
            assert not belongs_to(inst, label)

    def test_unknown_label_raises(self):
        with pytest.raises(UnknownCategoryError):
            belongs_to(_make_instrument(size="Mid"), "Tiny")

    def test_category_of(self):
        inst = _make_instrument(country="US", size="Mid")
        assert category_of(inst, Dimension.REGION) is Region.NORTH_AMERICA
        assert category_of(inst, "size") is Size.MID
        assert category_of(inst, Dimension.STYLE) is None


# ---------------------------------------------------------------------------
# TestEligibleLabels
# ---------------------------------------------------------------------------

@pytest.mark.schema
class TestEligibleLabels:

    def test_sample_universe(self):
        labels = eligible_labels(make_instruments())
        assert Region.NORTH_AMERICA in labels
        assert Region.EUROZONE in labels
        assert Region.JAPAN not in labels
        assert {Size.SMALL, Size.MID, Size.LARGE} <= labels
        assert Sector.ENERGY in labels
        assert Sector.UTILITIES not in labels

    def test_empty_universe(self):
        assert eligible_labels([]) == set()

    def test_minimum_proportions(self):
        bounds = minimum_proportions(make_instruments(), 0.05)
        assert bounds[Region.NORTH_AMERICA] == pytest.approx(0.15)
        assert bounds[Region.EUROZONE] == pytest.approx(0.10)
        assert bounds[Size.MID] == pytest.approx(0.05)
        assert Region.JAPAN not in bounds
