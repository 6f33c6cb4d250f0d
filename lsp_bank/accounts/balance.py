"""Balance cell that owns the ``balance >= 0`` invariant.

Every shipped account variant keeps its money in a :class:`Balance` and
routes deposits and withdrawals through it, so the invariant is enforced in
exactly one place.

Balance arithmetic is exact: a result that the decimal context would have
to round raises InvalidArgumentError and leaves the balance untouched.
"""

from decimal import Decimal, Inexact, InvalidOperation, localcontext
from typing import Union

from lsp_bank.exceptions import InsufficientFundsError, InvalidArgumentError
from lsp_bank.models.result import Err, Ok, Result

Amount = Union[Decimal, int, float, str]

ZERO = Decimal("0")


def to_amount(value: Amount) -> Decimal:
    """Normalise an amount to a finite Decimal.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Amount must be numeric, got {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise InvalidArgumentError(f"Amount must be numeric, got {value!r}") from e
    if not amount.is_finite():
        raise InvalidArgumentError(f"Amount must be finite, got {value!r}")
    return amount


def to_non_negative_amount(value: Amount) -> Decimal:
    amount = to_amount(value)
    if amount < ZERO:
        raise InvalidArgumentError(f"Amount can't be negative, got {amount}")
    return amount


def _exact(op: str, left: Decimal, right: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.traps[Inexact] = True
        try:
            return left + right if op == "+" else left - right
        except Inexact as e:
            raise InvalidArgumentError(
                f"{left} {op} {right} needs more than {ctx.prec} significant digits"
            ) from e


class Balance:
    """Non-negative running balance.

    Parameters
    ----------
    initial : Amount
        Opening balance. Negative values raise InvalidArgumentError.
    """

    __slots__ = ("_amount",)

    def __init__(self, initial: Amount = ZERO) -> None:
        amount = to_amount(initial)
        if amount < ZERO:
            raise InvalidArgumentError("Balance can't be negative")
        self._amount = amount

    @property
    def amount(self) -> Decimal:
        return self._amount

    def credit(self, amount: Amount) -> Decimal:
        """Add a non-negative amount and return the new balance."""
        self._amount = _exact("+", self._amount, to_non_negative_amount(amount))
        return self._amount

    def debit(self, amount: Amount, label: str = "account") -> Result[Decimal, InsufficientFundsError]:
        """Subtract ``amount`` if the balance covers it.

        Returns ``Ok(new_balance)`` on success. When the balance would go
        negative the balance is left untouched and
        ``Err(InsufficientFundsError)`` is returned.
        """
        amount = to_non_negative_amount(amount)
        if amount > self._amount:
            return Err(InsufficientFundsError(self._amount, amount, label))
        self._amount = _exact("-", self._amount, amount)
        return Ok(self._amount)

    def __repr__(self) -> str:
        return f"Balance({self._amount})"
