"""History constraint scenario: subtypes may not forbid inherited operations."""

import logging
from decimal import Decimal

from lsp_bank.accounts import FixedTermAccount, SavingsAccount, Withdrawable, create_account
from lsp_bank.antipatterns import FixedDepositAccount
from lsp_bank.client import BankClient
from lsp_bank.contracts import check_deposit_only, check_withdrawable
from lsp_bank.exceptions import UnsupportedOperationError
from lsp_bank.models.enums import AccountKind
from lsp_bank.scenarios.base import ScenarioResult
from lsp_bank.sinks.base import ReportSink

logger = logging.getLogger(__name__)


class HistoryConstraintScenario:
    """Contrast a withdraw-refusing subtype with a deposit-only capability.

    ``FixedDepositAccount`` advertises ``withdraw`` and then refuses it, so
    client code written against ``Withdrawable`` blows up. ``FixedTermAccount``
    never advertises ``withdraw`` and cannot be handed to that code at all.
    """

    def __init__(self, sink: ReportSink | None = None) -> None:
        self.sink = sink

    def run(self) -> ScenarioResult:
        logger.info("Starting history constraint scenario")
        result = ScenarioResult(name="history", expected_violators={FixedDepositAccount.__name__})
        client = BankClient([], [], sink=self.sink)

        account = create_account(AccountKind.SAVINGS, Decimal("100")).unwrap()
        result.reports.append(client.withdraw(account, Decimal("100")))

        fixed_deposit = FixedDepositAccount(Decimal("100"))
        try:
            client.withdraw(fixed_deposit, Decimal("50"))
        except UnsupportedOperationError as e:
            result.notes.append(f"{fixed_deposit.label} broke the client: {e}")

        fixed_term = create_account(AccountKind.FIXED_TERM).unwrap()
        if not isinstance(fixed_term, Withdrawable):
            result.notes.append(f"{fixed_term.label} does not offer withdraw")

        result.violations[SavingsAccount.__name__] = check_withdrawable(SavingsAccount)
        result.violations[FixedDepositAccount.__name__] = check_withdrawable(FixedDepositAccount)
        result.violations[FixedTermAccount.__name__] = check_deposit_only(FixedTermAccount)
        return result
