"""
Allocation Tool: Constraint System Builder

Pure functions for:
- Validating caller-supplied category proportions against the instruments
- Building the 0/1 membership matrix A (constraints x instruments)
- Reducing the target vector by the minimum weight every instrument receives

The engine solves for each instrument's excess weight above the minimum, so
b[i] = proportion_i - min_weight * (number of members of constraint i).

No LLM, no file I/O.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Mapping, Sequence, Union

import numpy as np

from portfolio_allocator.config.constants import PROPORTION_SUM_TOLERANCE
from portfolio_allocator.exceptions import ConfigurationError, UnreachableConstraintError
from portfolio_allocator.schemas.allocation_output import Instrument
from portfolio_allocator.schemas.taxonomy import (
    CategoryLabel,
    Dimension,
    dimension_of,
    parse_label,
)
from portfolio_allocator.tools.category_classifier import belongs_to, eligible_labels

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConstraintSystem:
    """Membership matrix and reduced targets for one allocation."""

    labels: tuple[CategoryLabel, ...]
    proportions: tuple[float, ...]
    matrix: np.ndarray
    target: np.ndarray
    min_weight: float

    @property
    def shape(self) -> tuple[int, int]:
        return self.matrix.shape


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_constraints(
    instruments: Sequence[Instrument],
    constraints: Mapping[Union[str, CategoryLabel], float],
) -> Dict[CategoryLabel, float]:
    """
    Validate constraints and return them keyed by typed label, in input order.

    Hard failures (ConfigurationError):
    - label is not a region, sector, size or style
    - the same label given twice (e.g. as string and as enum)
    - proportion not a finite number in [0, 1]
    - non-zero proportion for a label no instrument belongs to

    Per-dimension sums that differ from 1 only log a warning: such a system
    is infeasible rather than invalid and yields a positive RSE.
    """
    eligible = eligible_labels(instruments)
    validated: Dict[CategoryLabel, float] = {}

    for raw_label, raw_value in constraints.items():
        label = parse_label(raw_label)
        if label in validated:
            raise ConfigurationError(f"Constraint for '{label.value}' given more than once")

        try:
            value = float(raw_value)
        except (TypeError, ValueError):
            raise ConfigurationError(
                f"Proportion for '{label.value}' is not a number: {raw_value!r}"
            ) from None
        if not math.isfinite(value) or not (0.0 <= value <= 1.0):
            raise ConfigurationError(
                f"Proportion for '{label.value}' must be within [0, 1], got {value}"
            )

        if value > 0.0 and label not in eligible:
            raise UnreachableConstraintError(
                f"{label.value}={value} but no instrument belongs to {label.value}"
            )
        validated[label] = value

    sums: Dict[Dimension, float] = {}
    for label, value in validated.items():
        dim = dimension_of(label)
        sums[dim] = sums.get(dim, 0.0) + value
    for dim, total in sums.items():
        if abs(total - 1.0) > PROPORTION_SUM_TOLERANCE:
            logger.warning(
                f"{dim.value} proportions sum to {total:.6f}, not 1; "
                f"constraints cannot all be met exactly"
            )

    return validated


# ---------------------------------------------------------------------------
# System Construction
# ---------------------------------------------------------------------------

def build_constraint_system(
    instruments: Sequence[Instrument],
    constraints: Mapping[CategoryLabel, float],
    min_weight: float,
) -> ConstraintSystem:
    """
    Build A (M x N, 0/1) and the reduced target b (length M).

    Rows follow the constraint mapping's order, columns the instrument order.
    """
    labels = tuple(parse_label(label) for label in constraints)
    proportions = tuple(float(v) for v in constraints.values())

    matrix = np.zeros((len(labels), len(instruments)), dtype=np.float64)
    for i, label in enumerate(labels):
        for j, instrument in enumerate(instruments):
            if belongs_to(instrument, label):
                matrix[i, j] = 1.0

    target = np.asarray(proportions, dtype=np.float64) - min_weight * matrix.sum(axis=1)

    logger.debug(
        f"Built constraint system: {len(labels)} constraints x "
        f"{len(instruments)} instruments, min_weight={min_weight:.6f}"
    )
    return ConstraintSystem(
        labels=labels,
        proportions=proportions,
        matrix=matrix,
        target=target,
        min_weight=min_weight,
    )
