"""Random account generator."""

from collections.abc import Iterable, Iterator
from decimal import Decimal

from lsp_bank.accounts.capabilities import DepositOnly, Withdrawable
from lsp_bank.accounts.factory import create_account
from lsp_bank.generators.base import BaseGenerator
from lsp_bank.models.enums import AccountKind


class AccountGenerator(BaseGenerator):
    """Generate accounts with random kinds, holders and opening balances.

    Kind mix:
    - SAVINGS: ~50%
    - CURRENT: ~35%
    - FIXED_TERM: ~15%
    """

    ACCOUNT_KINDS = [AccountKind.SAVINGS, AccountKind.CURRENT, AccountKind.FIXED_TERM]
    ACCOUNT_KIND_WEIGHTS = [0.50, 0.35, 0.15]

    # Share of accounts opened with a zero balance
    EMPTY_OPENING_RATE = 0.3
    MAX_OPENING_BALANCE = 2000

    def generate(self, kind: AccountKind | None = None) -> DepositOnly:
        """Generate a single account.

        Parameters
        ----------
        kind : AccountKind | None
            Force a kind; drawn from the weighted mix when omitted.

        Returns
        -------
        DepositOnly
            The new account. Savings and current accounts are also
            ``Withdrawable``.
        """
        if kind is None:
            kind = self.random.choices(self.ACCOUNT_KINDS, weights=self.ACCOUNT_KIND_WEIGHTS, k=1)[0]

        if self.random.random() < self.EMPTY_OPENING_RATE:
            opening = Decimal("0")
        else:
            cents = self.random.randint(1, self.MAX_OPENING_BALANCE * 100)
            opening = Decimal(cents) / 100

        # Generated values are always valid, so unwrap cannot raise here
        return create_account(
            kind,
            opening,
            account_id=self.fake.uuid4(),
            holder=self.fake.name(),
        ).unwrap()

    def generate_many(self, count: int) -> Iterator[DepositOnly]:
        """Yield ``count`` random accounts."""
        for _ in range(count):
            yield self.generate()


def split_by_capability(
    accounts: Iterable[DepositOnly],
) -> tuple[list[Withdrawable], list[DepositOnly]]:
    """Separate withdrawable accounts from deposit-only ones."""
    withdrawable: list[Withdrawable] = []
    deposit_only: list[DepositOnly] = []
    for account in accounts:
        if isinstance(account, Withdrawable):
            withdrawable.append(account)
        else:
            deposit_only.append(account)
    return withdrawable, deposit_only
