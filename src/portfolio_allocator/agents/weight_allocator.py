"""
Weight Allocator
Constrained Portfolio Allocation Engine

Receives instruments, category proportions and monetary options.
Produces per-instrument amounts with:
- every amount a whole multiple of the tick
- amounts summing exactly to the total
- every amount at or above the minimum
- the residual error (RSE) of the least-squares solve

Pipeline: validate -> build A, b -> damped NNLS -> votes -> apportion
-> minimum repair -> amounts. Infeasible constraint systems are not errors;
they come back as a best-effort allocation with RSE > 0.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Union

from pydantic import ValidationError

from portfolio_allocator.config.constants import RSE_WARNING_TOLERANCE
from portfolio_allocator.exceptions import (
    ConfigurationError,
    DuplicateInstrumentError,
    EmptyUniverseError,
    MinimumAmountError,
    TickMismatchError,
)
from portfolio_allocator.schemas.allocation_output import (
    AllocationOptions,
    AllocationOutput,
    AllocationResult,
    Instrument,
)
from portfolio_allocator.schemas.taxonomy import CategoryLabel
from portfolio_allocator.tools.apportionment import apportion
from portfolio_allocator.tools.constraint_builder import (
    build_constraint_system,
    validate_constraints,
)
from portfolio_allocator.tools.nnls_solver import residual_error, solve_damped
from portfolio_allocator.tools.portfolio_assembler import (
    assemble,
    compute_votes,
    enforce_minimum,
)
from portfolio_allocator.tools.proportion_report import build_report

logger = logging.getLogger(__name__)

InstrumentLike = Union[Instrument, Mapping]
OptionsLike = Union[AllocationOptions, Mapping]


# ---------------------------------------------------------------------------
# Input coercion & validation
# ---------------------------------------------------------------------------

def _coerce_instruments(instruments: Iterable[InstrumentLike]) -> List[Instrument]:
    coerced = []
    for item in instruments:
        if isinstance(item, Instrument):
            coerced.append(item)
            continue
        try:
            coerced.append(Instrument.model_validate(item))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid instrument {item!r}: {e}") from e

    if not coerced:
        raise EmptyUniverseError("Cannot allocate over an empty instrument list")

    seen = set()
    for inst in coerced:
        if inst.ticker in seen:
            raise DuplicateInstrumentError(f"Ticker '{inst.ticker}' appears more than once")
        seen.add(inst.ticker)
    return coerced


def _coerce_options(options: OptionsLike) -> AllocationOptions:
    if isinstance(options, AllocationOptions):
        return options
    try:
        return AllocationOptions.model_validate(options)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid allocation options: {e}") from e


def validate_options(options: AllocationOptions, instrument_count: int) -> None:
    """
    Cross-field option checks.

    Raises:
        TickMismatchError: tick does not divide the total amount.
        MinimumAmountError: minimum above the total, or the minimum (in
            whole ticks) times the instrument count exceeds the total.
    """
    if options.total_amount % options.tick != 0:
        raise TickMismatchError(
            f"Tick {options.tick} does not divide total amount {options.total_amount}"
        )
    if options.min_amount > options.total_amount:
        raise MinimumAmountError(
            f"Minimum amount {options.min_amount} exceeds total amount {options.total_amount}"
        )
    if options.min_seats * instrument_count > options.total_seats:
        raise MinimumAmountError(
            f"{instrument_count} instruments x minimum {options.min_seats * options.tick} "
            f"exceeds total amount {options.total_amount}"
        )


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

def compute(
    instruments: Iterable[InstrumentLike],
    constraints: Mapping[Union[str, CategoryLabel], float],
    options: OptionsLike,
) -> AllocationResult:
    """
    Allocate ``options.total_amount`` over ``instruments``.

    Args:
        instruments: Instrument models or mappings with ticker, country,
            industry, size, style.
        constraints: Category label -> target proportion in [0, 1].
        options: AllocationOptions or a mapping (camelCase keys accepted).

    Returns:
        AllocationResult with amounts in input order and the RSE.

    Raises:
        ConfigurationError (or a subclass) for invalid inputs, before any
        numerical work starts; NumericalError if the solver fails.
    """
    universe = _coerce_instruments(instruments)
    opts = _coerce_options(options)
    validate_options(opts, len(universe))
    validated = validate_constraints(universe, constraints)

    logger.info(
        f"Allocating {opts.total_amount} over {len(universe)} instruments "
        f"with {len(validated)} constraints (tick={opts.tick}, "
        f"min={opts.min_amount}, {opts.algorithm.value})"
    )

    system = build_constraint_system(universe, validated, opts.min_weight)
    x = solve_damped(system)
    rse = residual_error(system, x)

    votes = compute_votes(x, opts.min_weight)
    logger.debug(f"Votes: {sum(votes)} total over {len(votes)} instruments")

    tickers = [inst.ticker for inst in universe]
    by_ticker = apportion(dict(zip(tickers, votes)), opts.total_seats, opts.algorithm)
    seats = enforce_minimum([by_ticker[t] for t in tickers], opts.min_seats)

    result = assemble(universe, seats, opts.tick, rse)

    if rse > RSE_WARNING_TOLERANCE:
        logger.warning(f"Constraints cannot all be met exactly; RSE={rse:.6g}")
    logger.info(f"Allocated {result.total()} across {len(universe)} instruments, RSE={rse:.6g}")
    return result


def run_allocation_pipeline(
    instruments: Iterable[InstrumentLike],
    constraints: Mapping[Union[str, CategoryLabel], float],
    options: OptionsLike,
) -> AllocationOutput:
    """
    Run the allocation and report achieved vs. requested proportions.

    Returns:
        Validated AllocationOutput
    """
    logger.info("Running weight allocation pipeline ...")

    universe = _coerce_instruments(instruments)
    opts = _coerce_options(options)
    result = compute(universe, constraints, opts)
    report = build_report(result, constraints)

    summary = (
        f"Allocated {result.total()} over {len(universe)} instruments with "
        f"{opts.algorithm.value}; {len(report.constraints)} constraints, "
        f"max deviation {report.max_abs_deviation:.4%}, RSE {result.rse:.6g}"
    )
    logger.info(f"Pipeline done: {summary}")

    return AllocationOutput(
        result=result,
        report=report,
        algorithm=opts.algorithm,
        summary=summary,
    )
