"""Scenario result container."""

from dataclasses import dataclass, field

from lsp_bank.models.report import TransactionReport


@dataclass
class ScenarioResult:
    """Outcome of running a scenario.

    ``violations`` maps each checked variant to its contract violations.
    Variants named in ``expected_violators`` are counter-examples that are
    supposed to fail; every other variant must come back clean.
    """

    name: str
    reports: list[TransactionReport] = field(default_factory=list)
    violations: dict[str, list[str]] = field(default_factory=dict)
    expected_violators: set[str] = field(default_factory=set)
    notes: list[str] = field(default_factory=list)

    @property
    def unexpected(self) -> dict[str, list[str]]:
        """Variants whose check result contradicts expectations."""
        problems: dict[str, list[str]] = {}
        for subject, found in self.violations.items():
            if subject in self.expected_violators and not found:
                problems[subject] = ["expected a contract violation, found none"]
            elif subject not in self.expected_violators and found:
                problems[subject] = found
        return problems

    @property
    def ok(self) -> bool:
        return not self.unexpected
