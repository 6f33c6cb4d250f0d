"""Class invariant scenario: the balance never goes negative."""

import logging
from decimal import Decimal

from lsp_bank.accounts import SavingsAccount, create_account
from lsp_bank.antipatterns import CheatAccount
from lsp_bank.client import BankClient
from lsp_bank.contracts import check_invariant, check_withdrawable
from lsp_bank.models.enums import AccountKind
from lsp_bank.scenarios.base import ScenarioResult
from lsp_bank.sinks.base import ReportSink

logger = logging.getLogger(__name__)


class InvariantScenario:
    """Withdraw the whole balance, then show how ``CheatAccount`` breaks the rule.

    Steps:
    1. A savings account opened with 100 withdraws 100 and ends at 0.
    2. Opening an account with -1 is rejected.
    3. A ``CheatAccount`` opened with 100 withdraws 200 and ends at -100,
       which the contract check reports.
    """

    def __init__(self, sink: ReportSink | None = None) -> None:
        self.sink = sink

    def run(self) -> ScenarioResult:
        logger.info("Starting class invariant scenario")
        result = ScenarioResult(name="invariant", expected_violators={CheatAccount.__name__})
        client = BankClient([], [], sink=self.sink)

        account = create_account(AccountKind.SAVINGS, Decimal("100")).unwrap()
        result.reports.append(client.withdraw(account, Decimal("100")))

        rejected = create_account(AccountKind.SAVINGS, Decimal("-1"))
        if rejected.is_err:
            result.notes.append(f"Negative opening balance rejected: {rejected.error}")
        else:
            result.notes.append("Negative opening balance was accepted")
            result.violations["create_account"] = ["accepted a negative opening balance"]

        cheat = CheatAccount(Decimal("100"))
        result.reports.append(client.withdraw(cheat, Decimal("200")))
        for violation in check_invariant(cheat):
            result.notes.append(f"{cheat.label}: {violation}")

        result.violations[SavingsAccount.__name__] = check_withdrawable(SavingsAccount)
        result.violations[CheatAccount.__name__] = check_withdrawable(CheatAccount)
        return result
