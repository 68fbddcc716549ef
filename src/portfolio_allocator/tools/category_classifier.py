"""
Allocation Tool: Category Classifier
Decides whether an instrument belongs to a region, sector, size or style.

Region and sector membership are derived through the static lookups in
schemas.taxonomy (country -> region, industry -> group -> sector); size and
style are stored on the instrument directly.

No LLM, no file I/O.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Union

from portfolio_allocator.schemas.allocation_output import Instrument
from portfolio_allocator.schemas.taxonomy import (
    CategoryLabel,
    Dimension,
    dimension_of,
    parse_label,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pure Functions
# ---------------------------------------------------------------------------

def category_of(instrument: Instrument, dimension: Dimension) -> Optional[CategoryLabel]:
    """The instrument's label in one dimension, or None if it has none."""
    dimension = Dimension(dimension)
    if dimension is Dimension.REGION:
        return instrument.region
    if dimension is Dimension.SECTOR:
        return instrument.sector
    if dimension is Dimension.SIZE:
        return instrument.size
    return instrument.style


def belongs_to(instrument: Instrument, label: Union[str, CategoryLabel]) -> bool:
    """
    Check whether an instrument belongs to a category label.

    Raises UnknownCategoryError for labels outside the four dimensions.
    An instrument missing the attribute a dimension derives from (no
    country, no industry, ...) belongs to no label of that dimension.
    """
    typed = parse_label(label)
    return category_of(instrument, dimension_of(typed)) == typed


def eligible_labels(instruments: Iterable[Instrument]) -> set[CategoryLabel]:
    """Labels at least one of the instruments belongs to, across all dimensions."""
    labels: set[CategoryLabel] = set()
    for instrument in instruments:
        for dimension in Dimension:
            label = category_of(instrument, dimension)
            if label is not None:
                labels.add(label)
    return labels


def minimum_proportions(
    instruments: Iterable[Instrument],
    min_weight: float,
) -> Dict[CategoryLabel, float]:
    """
    Lowest proportion each eligible label can reach when every instrument
    holds at least ``min_weight``.

    A constraint below this bound cannot be met exactly; the engine then
    returns a best-effort allocation with a positive RSE.
    """
    bounds: Dict[CategoryLabel, float] = {}
    for instrument in instruments:
        for dimension in Dimension:
            label = category_of(instrument, dimension)
            if label is not None:
                bounds[label] = bounds.get(label, 0.0) + min_weight
    return bounds
