"""Bank client that drives transactions through capability interfaces only."""

import logging
from collections.abc import Sequence
from decimal import Decimal

from lsp_bank.accounts.capabilities import DepositOnly, Withdrawable
from lsp_bank.config import ClientConfig
from lsp_bank.models.enums import TransactionStatus, TransactionType
from lsp_bank.models.report import TransactionReport
from lsp_bank.sinks.base import ReportSink

logger = logging.getLogger(__name__)


class BankClient:
    """Run the standard deposit/withdraw sequence over a set of accounts.

    The client only ever calls ``deposit`` and ``withdraw`` through the
    capability it was handed, so any conforming variant can be swapped in
    without the client noticing.

    Parameters
    ----------
    withdrawable_accounts : Sequence[Withdrawable]
        Accounts that get a deposit followed by a smaller withdrawal.
    deposit_only_accounts : Sequence[DepositOnly]
        Accounts that only get a deposit. Withdrawable accounts are
        accepted here too.
    sink : ReportSink | None
        Receives one report per operation.
    config : ClientConfig | None
        Amounts to move and the failure policy.
    """

    def __init__(
        self,
        withdrawable_accounts: Sequence[Withdrawable],
        deposit_only_accounts: Sequence[DepositOnly],
        sink: ReportSink | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        self.withdrawable_accounts = list(withdrawable_accounts)
        self.deposit_only_accounts = list(deposit_only_accounts)
        self.sink = sink
        self.config = config or ClientConfig()

    def process_transactions(self) -> list[TransactionReport]:
        """Deposit then withdraw on withdrawable accounts; deposit on the rest.

        Returns
        -------
        list[TransactionReport]
            One report per operation, in execution order.

        Raises
        ------
        InsufficientFundsError
            Only when ``config.raise_on_failure`` is set and a withdrawal
            is rejected.
        """
        logger.info(
            "Processing transactions: %d withdrawable, %d deposit-only accounts",
            len(self.withdrawable_accounts),
            len(self.deposit_only_accounts),
        )
        reports: list[TransactionReport] = []

        for account in self.withdrawable_accounts:
            reports.append(self.deposit(account, self.config.deposit_amount))
            reports.append(self.withdraw(account, self.config.withdraw_amount))

        for account in self.deposit_only_accounts:
            reports.append(self.deposit(account, self.config.fixed_deposit_amount))

        rejected = sum(1 for r in reports if not r.succeeded)
        logger.info("Processed %d transactions (%d rejected)", len(reports), rejected)
        return reports

    def deposit(self, account: DepositOnly, amount: Decimal) -> TransactionReport:
        """Deposit into any account and report the new balance."""
        balance = account.deposit(amount)
        report = TransactionReport(
            account_id=account.account_id,
            label=account.label,
            transaction_type=TransactionType.DEPOSIT,
            amount=amount,
            balance=balance,
            status=TransactionStatus.COMPLETED,
        )
        self._emit(report)
        return report

    def withdraw(self, account: Withdrawable, amount: Decimal) -> TransactionReport:
        """Withdraw from a withdrawable account and report the outcome."""
        result = account.withdraw(amount)

        if result.is_ok:
            report = TransactionReport(
                account_id=account.account_id,
                label=account.label,
                transaction_type=TransactionType.WITHDRAW,
                amount=amount,
                balance=result.value,
                status=TransactionStatus.COMPLETED,
            )
            self._emit(report)
            return report

        logger.warning("Withdrawal of %s from %s rejected: %s", amount, account.account_id, result.error)
        report = TransactionReport(
            account_id=account.account_id,
            label=account.label,
            transaction_type=TransactionType.WITHDRAW,
            amount=amount,
            balance=account.balance,
            status=TransactionStatus.REJECTED,
            reason=str(result.error),
        )
        self._emit(report)
        if self.config.raise_on_failure:
            raise result.error
        return report

    def _emit(self, report: TransactionReport) -> None:
        logger.debug("%s", report.message)
        if self.sink is not None:
            self.sink.write(report)
