"""Data models for refinance scenarios."""

from .results import (
    ConsolidationMode,
    DebtConsolidationResult,
    RefinanceComparison,
    ScenarioResult,
)
from .scenario import Debt, RefinanceInputs, ScenarioRecord

__all__ = [
    "Debt",
    "RefinanceInputs",
    "ScenarioRecord",
    "ConsolidationMode",
    "ScenarioResult",
    "DebtConsolidationResult",
    "RefinanceComparison",
]
