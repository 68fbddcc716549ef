"""
Portfolio Allocator Tool — CrewAI Wrapper Tests
Level 1: JSON in / JSON out, no LLM calls, no file I/O.

Skipped when the optional crewai dependency is not installed.
"""

from __future__ import annotations

import json

import pytest

pytest.importorskip("crewai")

from portfolio_allocator.tools.allocation_tool import (  # noqa: E402
    PortfolioAllocatorInput,
    PortfolioAllocatorTool,
)
from tests.fixtures.conftest import SAMPLE_CONSTRAINTS, SAMPLE_INSTRUMENTS  # noqa: E402


# ---------------------------------------------------------------------------
# TestPortfolioAllocatorTool
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestPortfolioAllocatorTool:

    def test_metadata(self):
        tool = PortfolioAllocatorTool()
        assert tool.name == "portfolio_allocator"
        assert tool.args_schema is PortfolioAllocatorInput

    def test_allocates(self):
        out = json.loads(PortfolioAllocatorTool()._run(
            instruments_json=json.dumps(SAMPLE_INSTRUMENTS),
            constraints_json=json.dumps(SAMPLE_CONSTRAINTS),
            total_amount="100",
            min_amount="5",
        ))
        assert out["amounts"] == {"a": "5", "b": "15", "c": "30", "d": "5", "e": "45"}
        assert out["rse"] == 0.0
        assert [c["label"] for c in out["constraints"]] == list(SAMPLE_CONSTRAINTS)

    def test_hare_niemeyer_alias(self):
        out = json.loads(PortfolioAllocatorTool()._run(
            instruments_json=json.dumps(SAMPLE_INSTRUMENTS),
            constraints_json=json.dumps(SAMPLE_CONSTRAINTS),
            total_amount="100",
            min_amount="5",
            algorithm="hareNiemeyer",
        ))
        assert "hare_niemeyer" in out["summary"]

    def test_configuration_error_returned_as_json(self):
        out = json.loads(PortfolioAllocatorTool()._run(
            instruments_json="[]",
            constraints_json="{}",
            total_amount="100",
        ))
        assert out["error_code"] == "EmptyUniverseError"

    def test_bad_json(self):
        out = json.loads(PortfolioAllocatorTool()._run(
            instruments_json="not json",
            constraints_json="{}",
            total_amount="100",
        ))
        assert "Invalid JSON" in out["error"]

    def test_constraints_not_an_object(self):
        out = json.loads(PortfolioAllocatorTool()._run(
            instruments_json=json.dumps(SAMPLE_INSTRUMENTS),
            constraints_json="[0.4, 0.6]",
            total_amount="100",
        ))
        assert "constraints_json must be a JSON object" in out["error"]

    def test_instruments_not_an_array(self):
        out = json.loads(PortfolioAllocatorTool()._run(
            instruments_json='{"ticker": "a"}',
            constraints_json=json.dumps(SAMPLE_CONSTRAINTS),
            total_amount="100",
        ))
        assert "instruments_json must be a JSON array" in out["error"]
