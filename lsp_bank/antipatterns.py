"""Account variants that break substitutability.

These are counter-examples. They look like ``Withdrawable`` accounts, so a
type checker accepts them, but each breaks a promise that callers of
``Withdrawable`` rely on. ``lsp_bank.contracts.check_withdrawable`` flags
both; ``create_account`` never builds them.
"""

import uuid
from decimal import Decimal

from lsp_bank.accounts.balance import ZERO, Amount, Balance, to_non_negative_amount
from lsp_bank.exceptions import InsufficientFundsError, UnsupportedOperationError
from lsp_bank.models.result import Ok, Result


class CheatAccount:
    """Withdraws without a funds check, so the balance can go negative.

    Opening balances are still validated; it is ``withdraw`` that weakens
    the invariant.
    """

    label = "Cheat Account"

    def __init__(self, initial_balance: Amount = ZERO, account_id: str | None = None) -> None:
        self._amount = Balance(initial_balance).amount
        self.account_id = account_id or uuid.uuid4().hex

    @property
    def balance(self) -> Decimal:
        return self._amount

    def deposit(self, amount: Amount) -> Decimal:
        self._amount += to_non_negative_amount(amount)
        return self._amount

    def withdraw(self, amount: Amount) -> Result[Decimal, InsufficientFundsError]:
        self._amount -= to_non_negative_amount(amount)
        return Ok(self._amount)


class FixedDepositAccount:
    """Exposes ``withdraw`` but refuses every call to it.

    Client code written against ``Withdrawable`` breaks as soon as it is
    handed one of these. Use ``FixedTermAccount``, which has no
    ``withdraw`` at all, instead.
    """

    label = "Fixed Deposit Account"

    def __init__(self, initial_balance: Amount = ZERO, account_id: str | None = None) -> None:
        self._balance = Balance(initial_balance)
        self.account_id = account_id or uuid.uuid4().hex

    @property
    def balance(self) -> Decimal:
        return self._balance.amount

    def deposit(self, amount: Amount) -> Decimal:
        return self._balance.credit(amount)

    def withdraw(self, amount: Amount) -> Result[Decimal, InsufficientFundsError]:
        raise UnsupportedOperationError("Withdraw not allowed in Fixed Deposit")
