"""Capability-based substitution scenario."""

import logging

from lsp_bank.accounts import (
    CurrentAccount,
    FixedTermAccount,
    SavingsAccount,
    create_account,
)
from lsp_bank.client import BankClient
from lsp_bank.config import ClientConfig
from lsp_bank.contracts import check_deposit_only, check_withdrawable
from lsp_bank.models.enums import AccountKind
from lsp_bank.scenarios.base import ScenarioResult
from lsp_bank.sinks.base import ReportSink

logger = logging.getLogger(__name__)


class SubstitutionScenario:
    """Drive savings, current and fixed-term accounts through one client.

    Savings and current accounts sit behind ``Withdrawable``; the
    fixed-term account sits behind ``DepositOnly`` and is never asked to
    withdraw.
    """

    def __init__(self, sink: ReportSink | None = None, config: ClientConfig | None = None) -> None:
        self.sink = sink
        self.config = config or ClientConfig()

    def run(self) -> ScenarioResult:
        logger.info("Starting substitution scenario")
        result = ScenarioResult(name="substitution")

        withdrawable = [
            create_account(AccountKind.SAVINGS).unwrap(),
            create_account(AccountKind.CURRENT).unwrap(),
        ]
        deposit_only = [create_account(AccountKind.FIXED_TERM).unwrap()]

        client = BankClient(withdrawable, deposit_only, sink=self.sink, config=self.config)
        result.reports = client.process_transactions()

        for variant in (SavingsAccount, CurrentAccount):
            result.violations[variant.__name__] = check_withdrawable(variant)
        result.violations[FixedTermAccount.__name__] = check_deposit_only(FixedTermAccount)

        return result
