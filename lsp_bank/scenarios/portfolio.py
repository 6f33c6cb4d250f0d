"""Random portfolio scenario built from generated accounts."""

import logging

from lsp_bank.accounts.capabilities import DepositOnly, Withdrawable
from lsp_bank.client import BankClient
from lsp_bank.config import ClientConfig
from lsp_bank.contracts import check_invariant
from lsp_bank.generators.account import AccountGenerator, split_by_capability
from lsp_bank.models.report import AccountSnapshot
from lsp_bank.scenarios.base import ScenarioResult
from lsp_bank.sinks.base import ReportSink

logger = logging.getLogger(__name__)


class RandomPortfolioScenario:
    """Run the client over a random mix of accounts.

    Withdrawable accounts get the standard deposit before their withdrawal,
    so with the default amounts every withdrawal is covered; a config with
    ``withdraw_amount`` above ``deposit_amount`` produces rejections for the
    accounts that open low. Every account must satisfy the invariant
    afterwards, and the closing balances go to the sink as an ``accounts``
    batch.
    """

    BATCH_NAME = "accounts"

    def __init__(
        self,
        num_accounts: int = 10,
        seed: int | None = None,
        sink: ReportSink | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        """Initialize random portfolio scenario.

        Parameters
        ----------
        num_accounts : int
            Number of accounts to generate.
        seed : int | None
            Random seed for reproducibility.
        sink : ReportSink | None
            Receives the transaction reports and the closing balances.
        config : ClientConfig | None
            Client amounts and failure policy.
        """
        self.num_accounts = num_accounts
        self.seed = seed
        self.sink = sink
        self.config = config or ClientConfig()
        self._account_gen = AccountGenerator(seed=seed)

    def run(self) -> ScenarioResult:
        logger.info("Starting random portfolio scenario: %d accounts", self.num_accounts)
        result = ScenarioResult(name="random")

        accounts = list(self._account_gen.generate_many(self.num_accounts))
        withdrawable, deposit_only = split_by_capability(accounts)
        logger.info(
            "Generated %d withdrawable and %d deposit-only accounts",
            len(withdrawable),
            len(deposit_only),
        )

        client = BankClient(withdrawable, deposit_only, sink=self.sink, config=self.config)
        result.reports = client.process_transactions()

        for account in accounts:
            found = check_invariant(account)
            if found:
                result.violations[account.account_id] = found

        if self.sink is not None:
            self.sink.write_batch(self.BATCH_NAME, [snapshot(account) for account in accounts])

        return result


def snapshot(account: DepositOnly) -> AccountSnapshot:
    """Capture an account's closing balance."""
    return AccountSnapshot(
        account_id=account.account_id,
        label=account.label,
        withdrawable=isinstance(account, Withdrawable),
        balance=account.balance,
    )
