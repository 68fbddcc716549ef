"""
Constraint System Builder — Validation & Matrix Tests
Level 1: Pure function tests, no LLM calls, no file I/O.
"""

from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from portfolio_allocator.exceptions import (
    ConfigurationError,
    UnknownCategoryError,
    UnreachableConstraintError,
)
from portfolio_allocator.schemas.taxonomy import Region, Size
from portfolio_allocator.tools.constraint_builder import (
    build_constraint_system,
    validate_constraints,
)
from tests.fixtures.conftest import SAMPLE_CONSTRAINTS, make_instruments


# ---------------------------------------------------------------------------
# TestValidateConstraints
# ---------------------------------------------------------------------------

@pytest.mark.schema
class TestValidateConstraints:

    def test_typed_keys_in_input_order(self):
        validated = validate_constraints(make_instruments(), SAMPLE_CONSTRAINTS)
        assert list(validated) == [
            Region.NORTH_AMERICA, Region.EUROZONE, Size.SMALL, Size.MID, Size.LARGE,
        ]
        assert validated[Size.MID] == 0.3

    def test_unknown_label(self):
        with pytest.raises(UnknownCategoryError):
            validate_constraints(make_instruments(), {"Atlantis": 0.5})

    def test_duplicate_label(self):
        with pytest.raises(ConfigurationError, match="more than once"):
            validate_constraints(make_instruments(), {"Mid": 0.3, Size.MID: 0.3})

    @pytest.mark.parametrize("value", [-0.1, 1.5, math.nan, math.inf])
    def test_out_of_range(self, value):
        with pytest.raises(ConfigurationError):
            validate_constraints(make_instruments(), {"Mid": value})

    def test_not_a_number(self):
        with pytest.raises(ConfigurationError, match="not a number"):
            validate_constraints(make_instruments(), {"Mid": "lots"})

    def test_unreachable_nonzero(self):
        with pytest.raises(UnreachableConstraintError, match="Japan"):
            validate_constraints(make_instruments(), {"Japan": 0.2})

    def test_unreachable_zero_allowed(self):
        validated = validate_constraints(make_instruments(), {"Japan": 0.0})
        assert validated == {Region.JAPAN: 0.0}

    def test_empty_constraints(self):
        assert validate_constraints(make_instruments(), {}) == {}

    def test_dimension_sum_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            validate_constraints(make_instruments(), {"NorthAmerica": 0.4, "Eurozone": 0.4})
        assert "region proportions sum to 0.800000" in caplog.text

    def test_dimension_sum_exact_no_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            validate_constraints(make_instruments(), SAMPLE_CONSTRAINTS)
        assert caplog.text == ""


# ---------------------------------------------------------------------------
# TestBuildConstraintSystem
# ---------------------------------------------------------------------------

@pytest.mark.schema
class TestBuildConstraintSystem:

    def test_membership_matrix(self):
        system = build_constraint_system(make_instruments(), SAMPLE_CONSTRAINTS, 0.0)
        expected = np.array([
            [1, 0, 1, 1, 0],  # NorthAmerica: a, c, d
            [0, 1, 0, 0, 1],  # Eurozone: b, e
            [1, 1, 0, 0, 0],  # Small
            [0, 0, 1, 0, 0],  # Mid
            [0, 0, 0, 1, 1],  # Large
        ], dtype=float)
        np.testing.assert_array_equal(system.matrix, expected)
        assert system.shape == (5, 5)

    def test_target_reduced_by_min_weight(self):
        system = build_constraint_system(make_instruments(), SAMPLE_CONSTRAINTS, 0.05)
        np.testing.assert_allclose(system.target, [0.25, 0.5, 0.1, 0.25, 0.4])
        assert system.proportions == (0.4, 0.6, 0.2, 0.3, 0.5)

    def test_zero_min_weight_keeps_targets(self):
        system = build_constraint_system(make_instruments(), SAMPLE_CONSTRAINTS, 0.0)
        np.testing.assert_allclose(system.target, list(SAMPLE_CONSTRAINTS.values()))

    def test_no_constraints(self):
        system = build_constraint_system(make_instruments(), {}, 0.05)
        assert system.shape == (0, 5)
        assert system.target.shape == (0,)

    def test_label_without_members_is_zero_row(self):
        system = build_constraint_system(make_instruments(), {"Japan": 0.0}, 0.05)
        assert system.matrix.sum() == 0
        assert system.target[0] == 0.0
