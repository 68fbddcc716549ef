"""
Allocation Tool: CrewAI wrapper
Exposes the allocation engine to CrewAI agents as a JSON-in/JSON-out tool.

Requires the ``agents`` extra (crewai). The engine itself does not.
"""

from __future__ import annotations

import json
import logging

from crewai.tools import BaseTool
from pydantic import BaseModel, Field

from portfolio_allocator.agents.weight_allocator import run_allocation_pipeline
from portfolio_allocator.config.constants import (
    DEFAULT_ALGORITHM,
    DEFAULT_MIN_AMOUNT,
    DEFAULT_TICK,
)
from portfolio_allocator.exceptions import AllocatorException

logger = logging.getLogger(__name__)


class PortfolioAllocatorInput(BaseModel):
    instruments_json: str = Field(
        ...,
        description=(
            "JSON list of instruments, each with ticker and optional "
            "country (ISO code), industry, size, style"
        ),
    )
    constraints_json: str = Field(
        ...,
        description="JSON object of category label -> proportion, e.g. {\"NorthAmerica\": 0.4}",
    )
    total_amount: str = Field(..., description="Total amount to allocate")
    min_amount: str = Field(str(DEFAULT_MIN_AMOUNT), description="Minimum amount per instrument")
    tick: str = Field(str(DEFAULT_TICK), description="Rounding increment for amounts")
    algorithm: str = Field(DEFAULT_ALGORITHM, description="sainte_lague or hare_niemeyer")


class PortfolioAllocatorTool(BaseTool):
    """Allocate an amount over instruments to match category proportions."""

    name: str = "portfolio_allocator"
    description: str = (
        "Split a total amount across instruments so that region, sector, "
        "size and style proportions match targets, with every amount a "
        "multiple of the tick and at least the minimum"
    )
    args_schema: type[BaseModel] = PortfolioAllocatorInput

    def _run(
        self,
        instruments_json: str,
        constraints_json: str,
        total_amount: str,
        min_amount: str = str(DEFAULT_MIN_AMOUNT),
        tick: str = str(DEFAULT_TICK),
        algorithm: str = DEFAULT_ALGORITHM,
    ) -> str:
        try:
            instruments = json.loads(instruments_json)
            constraints = json.loads(constraints_json)
        except json.JSONDecodeError as e:
            return json.dumps({"error": f"Invalid JSON input: {e}"})
        if not isinstance(instruments, list):
            return json.dumps({"error": "instruments_json must be a JSON array of instruments"})
        if not isinstance(constraints, dict):
            return json.dumps({"error": "constraints_json must be a JSON object of label -> proportion"})

        options = {
            "total_amount": str(total_amount),
            "min_amount": str(min_amount),
            "tick": str(tick),
            "algorithm": algorithm,
        }
        try:
            output = run_allocation_pipeline(instruments, constraints, options)
        except AllocatorException as e:
            logger.warning(f"Allocation tool rejected input: {e.message}")
            return json.dumps({"error": e.message, "error_code": e.error_code})

        return json.dumps({
            "amounts": {t: str(a) for t, a in output.result.amounts().items()},
            "rse": output.result.rse,
            "constraints": [
                {
                    "label": c.label,
                    "target": c.target,
                    "achieved": c.achieved,
                }
                for c in output.report.constraints
            ],
            "summary": output.summary,
        })
