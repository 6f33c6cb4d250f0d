"""Concrete account variants.

Savings and current accounts provide the ``Withdrawable`` capability and
apply the same funds check. Fixed-term accounts provide only
``DepositOnly``; they have no ``withdraw`` method at all.
"""

import uuid
from decimal import Decimal

from lsp_bank.accounts.balance import ZERO, Amount, Balance
from lsp_bank.exceptions import InsufficientFundsError
from lsp_bank.models.enums import AccountKind
from lsp_bank.models.result import Result


def _new_account_id() -> str:
    return uuid.uuid4().hex


def _label(kind_name: str, holder: str | None) -> str:
    return f"{kind_name} ({holder})" if holder else kind_name


class SavingsAccount:
    """Savings account: deposit and withdraw with a funds check."""

    kind = AccountKind.SAVINGS
    kind_name = "Savings Account"

    def __init__(
        self,
        initial_balance: Amount = ZERO,
        account_id: str | None = None,
        holder: str | None = None,
    ) -> None:
        self._balance = Balance(initial_balance)
        self.account_id = account_id or _new_account_id()
        self.holder = holder

    @property
    def label(self) -> str:
        return _label(self.kind_name, self.holder)

    @property
    def balance(self) -> Decimal:
        return self._balance.amount

    def deposit(self, amount: Amount) -> Decimal:
        return self._balance.credit(amount)

    def withdraw(self, amount: Amount) -> Result[Decimal, InsufficientFundsError]:
        return self._balance.debit(amount, self.label)

    def __repr__(self) -> str:
        return f"SavingsAccount(account_id={self.account_id!r}, balance={self.balance})"


class CurrentAccount:
    """Current account.

    Same withdrawal policy as :class:`SavingsAccount`. An overdraft facility
    would have to keep ``balance >= 0`` observable to callers of
    ``Withdrawable``, so none is offered here.
    """

    kind = AccountKind.CURRENT
    kind_name = "Current Account"

    def __init__(
        self,
        initial_balance: Amount = ZERO,
        account_id: str | None = None,
        holder: str | None = None,
    ) -> None:
        self._balance = Balance(initial_balance)
        self.account_id = account_id or _new_account_id()
        self.holder = holder

    @property
    def label(self) -> str:
        return _label(self.kind_name, self.holder)

    @property
    def balance(self) -> Decimal:
        return self._balance.amount

    def deposit(self, amount: Amount) -> Decimal:
        return self._balance.credit(amount)

    def withdraw(self, amount: Amount) -> Result[Decimal, InsufficientFundsError]:
        return self._balance.debit(amount, self.label)

    def __repr__(self) -> str:
        return f"CurrentAccount(account_id={self.account_id!r}, balance={self.balance})"


class FixedTermAccount:
    """Fixed-term deposit: money goes in, nothing comes out before term."""

    kind = AccountKind.FIXED_TERM
    kind_name = "Fixed Term Account"

    def __init__(
        self,
        initial_balance: Amount = ZERO,
        account_id: str | None = None,
        holder: str | None = None,
    ) -> None:
        self._balance = Balance(initial_balance)
        self.account_id = account_id or _new_account_id()
        self.holder = holder

    @property
    def label(self) -> str:
        return _label(self.kind_name, self.holder)

    @property
    def balance(self) -> Decimal:
        return self._balance.amount

    def deposit(self, amount: Amount) -> Decimal:
        return self._balance.credit(amount)

    def __repr__(self) -> str:
        return f"FixedTermAccount(account_id={self.account_id!r}, balance={self.balance})"
