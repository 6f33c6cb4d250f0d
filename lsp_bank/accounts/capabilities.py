"""Capability interfaces for accounts.

``DepositOnly`` and ``Withdrawable`` are structural protocols. A variant
gets a capability by implementing its methods, not by inheriting from it,
so an account that cannot withdraw simply has no ``withdraw`` attribute and
a type checker rejects it wherever ``Withdrawable`` is required.

Both protocols are runtime checkable so callers such as the account
generator can sort a mixed collection by capability.
"""

from decimal import Decimal
from typing import Protocol, runtime_checkable

from lsp_bank.accounts.balance import Amount
from lsp_bank.exceptions import InsufficientFundsError
from lsp_bank.models.result import Result


@runtime_checkable
class DepositOnly(Protocol):
    """An account that accepts deposits.

    ``deposit`` never rejects a non-negative amount.
    """

    account_id: str

    @property
    def label(self) -> str:
        """Display name used in transaction reports."""
        ...

    @property
    def balance(self) -> Decimal:
        """Current balance, never negative."""
        ...

    def deposit(self, amount: Amount) -> Decimal:
        """Add ``amount`` and return the new balance."""
        ...


@runtime_checkable
class Withdrawable(DepositOnly, Protocol):
    """An account that accepts deposits and withdrawals.

    ``withdraw`` succeeds iff the balance covers the amount. It may reject
    a withdrawal for insufficient funds, but it must never refuse the
    operation as a matter of account type.
    """

    def withdraw(self, amount: Amount) -> Result[Decimal, InsufficientFundsError]:
        """Remove ``amount`` when covered; otherwise leave the balance unchanged."""
        ...
