"""Behavioural checks for account variants.

A variant is substitutable for a capability when it honours the same
observable contract as every other implementer:

- opening with a negative balance is rejected,
- ``deposit`` adds exactly the amount,
- a covered ``withdraw`` succeeds and removes exactly the amount,
- an uncovered ``withdraw`` returns ``Err(InsufficientFundsError)`` and
  leaves the balance alone,
- ``withdraw`` is never refused outright (history constraint),
- the balance is never negative.

Each ``check_*`` function returns a list of violation messages; an empty
list means the variant passed.
"""

import logging
from collections.abc import Callable
from decimal import Decimal
from typing import Any

from lsp_bank.accounts.capabilities import DepositOnly, Withdrawable
from lsp_bank.exceptions import (
    ContractViolationError,
    InsufficientFundsError,
    InvalidArgumentError,
)
from lsp_bank.models.result import Err, Ok

logger = logging.getLogger(__name__)

AccountFactory = Callable[[Decimal], Any]


def _add(violations: list[str], message: str) -> None:
    if message not in violations:
        violations.append(message)


def check_invariant(account: Any) -> list[str]:
    """Check that the account balance is not negative."""
    if account.balance < 0:
        return [f"balance is negative ({account.balance})"]
    return []


def _check_opening(factory: AccountFactory, violations: list[str]) -> None:
    try:
        factory(Decimal("-1"))
    except InvalidArgumentError:
        return
    _add(violations, "opening with a negative balance was accepted")


def _check_deposit(factory: AccountFactory, violations: list[str]) -> None:
    account = factory(Decimal("0"))
    account.deposit(Decimal("1000"))
    if account.balance != Decimal("1000"):
        _add(violations, f"deposit of 1000 into 0 left balance {account.balance}")
    for violation in check_invariant(account):
        _add(violations, violation)


def check_deposit_only(factory: AccountFactory) -> list[str]:
    """Check the ``DepositOnly`` contract for accounts built by ``factory``."""
    violations: list[str] = []
    if not isinstance(factory(Decimal("0")), DepositOnly):
        return ["does not provide the DepositOnly capability"]
    _check_opening(factory, violations)
    _check_deposit(factory, violations)
    return violations


def check_withdrawable(factory: AccountFactory) -> list[str]:
    """Check the ``Withdrawable`` contract for accounts built by ``factory``.

    Parameters
    ----------
    factory : Callable[[Decimal], Any]
        Builds a fresh account from an opening balance, e.g. a variant class.

    Returns
    -------
    list[str]
        Violation messages; empty when the variant is substitutable.
    """
    violations: list[str] = []
    if not isinstance(factory(Decimal("0")), Withdrawable):
        return ["does not provide the Withdrawable capability"]

    _check_opening(factory, violations)
    _check_deposit(factory, violations)

    # Covered withdrawal: 100 from 100 must succeed and leave 0.
    account = factory(Decimal("100"))
    try:
        outcome = account.withdraw(Decimal("100"))
    except Exception as e:
        _add(violations, f"withdraw refused outright: {e}")
    else:
        if not isinstance(outcome, (Ok, Err)):
            _add(violations, f"withdraw returned {outcome!r} instead of a result")
        elif outcome.is_err:
            _add(violations, f"covered withdraw of 100 from 100 was rejected: {outcome.error}")
        elif account.balance != Decimal("0"):
            _add(violations, f"withdraw of 100 from 100 left balance {account.balance}")

    # Uncovered withdrawal: 200 from 100 must be rejected without side effects.
    account = factory(Decimal("100"))
    try:
        outcome = account.withdraw(Decimal("200"))
    except Exception as e:
        _add(violations, f"withdraw refused outright: {e}")
    else:
        if not isinstance(outcome, (Ok, Err)):
            _add(violations, f"withdraw returned {outcome!r} instead of a result")
        elif outcome.is_ok:
            _add(violations, "uncovered withdraw of 200 from 100 was applied")
        elif not isinstance(outcome.error, InsufficientFundsError):
            _add(violations, f"uncovered withdraw failed with {type(outcome.error).__name__}")
    if account.balance != Decimal("100") and account.balance >= 0:
        _add(violations, f"rejected withdraw changed balance to {account.balance}")
    for violation in check_invariant(account):
        _add(violations, violation)

    return violations


def assert_substitutable(
    factory: AccountFactory,
    capability: type = Withdrawable,
    name: str | None = None,
) -> None:
    """Raise ContractViolationError unless ``factory`` builds conforming accounts.

    Raises
    ------
    ContractViolationError
        Listing every violation found.
    """
    subject = name or getattr(factory, "__name__", repr(factory))
    if capability is Withdrawable:
        violations = check_withdrawable(factory)
    elif capability is DepositOnly:
        violations = check_deposit_only(factory)
    else:
        raise InvalidArgumentError(f"Unknown capability: {capability!r}")

    if violations:
        logger.warning("%s is not substitutable for %s: %s", subject, capability.__name__, violations)
        raise ContractViolationError(subject, violations)
    logger.debug("%s honours the %s contract", subject, capability.__name__)
