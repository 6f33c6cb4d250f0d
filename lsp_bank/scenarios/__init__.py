"""Runnable demonstrations of substitutable account hierarchies."""

from lsp_bank.scenarios.base import ScenarioResult
from lsp_bank.scenarios.history import HistoryConstraintScenario
from lsp_bank.scenarios.invariant import InvariantScenario
from lsp_bank.scenarios.portfolio import RandomPortfolioScenario
from lsp_bank.scenarios.substitution import SubstitutionScenario

__all__ = [
    "HistoryConstraintScenario",
    "InvariantScenario",
    "RandomPortfolioScenario",
    "ScenarioResult",
    "SubstitutionScenario",
]
