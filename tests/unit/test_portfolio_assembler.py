"""
Portfolio Assembler Tests
Level 1: Pure function tests, no LLM calls, no file I/O.
"""

from __future__ import annotations

import logging
from decimal import Decimal

import numpy as np
import pytest

from portfolio_allocator.exceptions import MinimumAmountError, NumericalError
from portfolio_allocator.tools.portfolio_assembler import (
    assemble,
    compute_votes,
    enforce_minimum,
)
from tests.fixtures.conftest import make_instruments


# ---------------------------------------------------------------------------
# TestComputeVotes
# ---------------------------------------------------------------------------

@pytest.mark.schema
class TestComputeVotes:

    def test_adds_min_weight(self):
        votes = compute_votes(np.array([0.0, 0.1, 0.25, 0.0, 0.4]), 0.05)
        assert votes == [50000, 150000, 300000, 50000, 450000]

    def test_absorbs_solver_noise(self):
        x = np.array([0.1 - 3e-13, 0.2 + 4e-13])
        assert compute_votes(x, 0.0) == [100000, 200000]

    def test_custom_epsilon(self):
        assert compute_votes(np.array([0.25, 0.75]), 0.0, epsilon=0.01) == [25, 75]

    def test_halves_round_up(self):
        assert compute_votes(np.array([2.5, 3.5]), 0.0, epsilon=1.0) == [3, 4]

    def test_returns_python_ints(self):
        votes = compute_votes(np.array([0.5]), 0.0)
        assert type(votes[0]) is int

    def test_non_finite(self):
        with pytest.raises(NumericalError):
            compute_votes(np.array([np.nan, 0.1]), 0.0)


# ---------------------------------------------------------------------------
# TestEnforceMinimum
# ---------------------------------------------------------------------------

@pytest.mark.schema
class TestEnforceMinimum:

    def test_noop_when_satisfied(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert enforce_minimum([5, 15, 30, 5, 45], 5) == [5, 15, 30, 5, 45]
        assert caplog.text == ""

    def test_zero_floor_noop(self):
        assert enforce_minimum([0, 10], 0) == [0, 10]

    def test_takes_from_largest(self):
        assert enforce_minimum([14, 20, 16, 50], 15) == [15, 20, 16, 49]

    def test_ties_take_from_earliest(self):
        assert enforce_minimum([0, 6, 6], 2) == [2, 5, 5]

    def test_fills_earliest_deficit_first(self):
        assert enforce_minimum([1, 1, 5], 2) == [2, 2, 3]

    def test_sum_preserved(self, caplog):
        seats = [3, 0, 40, 12, 1]
        with caplog.at_level(logging.WARNING):
            repaired = enforce_minimum(seats, 4)
        assert sum(repaired) == sum(seats)
        assert min(repaired) >= 4
        assert "Moved" in caplog.text

    def test_impossible_floor(self):
        with pytest.raises(MinimumAmountError):
            enforce_minimum([1, 1, 1], 2)


# ---------------------------------------------------------------------------
# TestAssemble
# ---------------------------------------------------------------------------

@pytest.mark.schema
class TestAssemble:

    def test_amounts_are_seats_times_tick(self):
        instruments = make_instruments()
        result = assemble(instruments, [1, 3, 6, 1, 9], Decimal(5), 0.0)
        assert [w.ticker for w in result.weighted_instruments] == ["a", "b", "c", "d", "e"]
        assert result.amounts() == {
            "a": Decimal(5), "b": Decimal(15), "c": Decimal(30),
            "d": Decimal(5), "e": Decimal(45),
        }
        assert result.total() == Decimal(100)
        assert result.rse == 0.0

    def test_fractional_tick_exact(self):
        instruments = make_instruments()[:3]
        result = assemble(instruments, [1, 2, 7], Decimal("0.1"), 0.0)
        assert result.total() == Decimal("1.0")
        assert result.amounts()["c"] == Decimal("0.7")

    def test_instrument_attached(self):
        instruments = make_instruments()
        result = assemble(instruments, [20] * 5, Decimal(1), 0.5)
        assert result.weighted_instruments[2].instrument == instruments[2]
        assert result.rse == 0.5

    def test_length_mismatch(self):
        with pytest.raises(NumericalError):
            assemble(make_instruments(), [1, 2], Decimal(1), 0.0)
