"""
Allocation Tool: Proportion Report
Compares an allocation's achieved category proportions with the requested
ones and breaks the result down over every region, sector, size and style.

The DataFrame renderers are for tabular display only; the engine itself
never depends on pandas.

No LLM, no file I/O.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Mapping, Union

import pandas as pd

from portfolio_allocator.schemas.allocation_output import (
    AllocationReport,
    AllocationResult,
    ConstraintProportion,
)
from portfolio_allocator.schemas.taxonomy import (
    CategoryLabel,
    Dimension,
    dimension_of,
    labels_of,
    parse_label,
)
from portfolio_allocator.tools.category_classifier import belongs_to, category_of

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pure Functions
# ---------------------------------------------------------------------------

def achieved_proportion(result: AllocationResult, label: Union[str, CategoryLabel]) -> float:
    """Share of the allocated total held by members of ``label``."""
    total = result.total()
    if total == 0:
        return 0.0
    held = sum(
        (w.amount for w in result.weighted_instruments if belongs_to(w.instrument, label)),
        Decimal(0),
    )
    return float(held / total)


def distribution(result: AllocationResult) -> Dict[Dimension, Dict[str, float]]:
    """Achieved proportion of every label in every dimension, zeros included."""
    total = result.total()
    out: Dict[Dimension, Dict[str, float]] = {}
    for dim in Dimension:
        held = {label.value: Decimal(0) for label in labels_of(dim)}
        for w in result.weighted_instruments:
            label = category_of(w.instrument, dim)
            if label is not None:
                held[label.value] += w.amount
        out[dim] = {
            name: (float(amount / total) if total else 0.0)
            for name, amount in held.items()
        }
    return out


def build_report(
    result: AllocationResult,
    constraints: Mapping[Union[str, CategoryLabel], float],
) -> AllocationReport:
    """
    Target vs. achieved proportion for each constraint, in constraint order,
    plus the full per-dimension distribution.
    """
    rows = []
    for raw_label, target in constraints.items():
        label = parse_label(raw_label)
        members = sum(1 for w in result.weighted_instruments if belongs_to(w.instrument, label))
        rows.append(ConstraintProportion(
            label=label.value,
            dimension=dimension_of(label),
            target=float(target),
            achieved=achieved_proportion(result, label),
            member_count=members,
        ))

    report = AllocationReport(
        constraints=rows,
        distribution=distribution(result),
        rse=result.rse,
    )
    logger.debug(
        f"Report over {len(rows)} constraints, "
        f"max deviation {report.max_abs_deviation:.6f}"
    )
    return report


# ---------------------------------------------------------------------------
# Tabular rendering
# ---------------------------------------------------------------------------

def report_frame(report: AllocationReport) -> pd.DataFrame:
    """One row per constraint: label, dimension, target, achieved, deviation, members."""
    columns = ["label", "dimension", "target", "achieved", "deviation", "members"]
    records = [
        {
            "label": c.label,
            "dimension": c.dimension.value,
            "target": c.target,
            "achieved": c.achieved,
            "deviation": c.deviation,
            "members": c.member_count,
        }
        for c in report.constraints
    ]
    return pd.DataFrame.from_records(records, columns=columns)


def distribution_frame(report: AllocationReport) -> pd.DataFrame:
    """Long-format distribution: dimension, label, proportion; empty labels dropped."""
    records = [
        {"dimension": dim.value, "label": label, "proportion": share}
        for dim, shares in report.distribution.items()
        for label, share in shares.items()
        if share > 0
    ]
    return pd.DataFrame.from_records(records, columns=["dimension", "label", "proportion"])
