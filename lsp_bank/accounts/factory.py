"""Account construction by kind."""

import logging

from lsp_bank.accounts.balance import ZERO, Amount
from lsp_bank.accounts.capabilities import DepositOnly
from lsp_bank.accounts.variants import CurrentAccount, FixedTermAccount, SavingsAccount
from lsp_bank.exceptions import InvalidArgumentError
from lsp_bank.models.enums import AccountKind
from lsp_bank.models.result import Err, Ok, Result

logger = logging.getLogger(__name__)

ACCOUNT_VARIANTS = {
    AccountKind.SAVINGS: SavingsAccount,
    AccountKind.CURRENT: CurrentAccount,
    AccountKind.FIXED_TERM: FixedTermAccount,
}


def create_account(
    kind: AccountKind | str,
    initial_balance: Amount = ZERO,
    account_id: str | None = None,
    holder: str | None = None,
) -> Result[DepositOnly, InvalidArgumentError]:
    """Open an account of the given kind.

    Parameters
    ----------
    kind : AccountKind | str
        Account kind; strings are matched case-insensitively.
    initial_balance : Amount
        Opening balance. Must be a finite, non-negative amount.
    account_id : str | None
        Explicit identifier; a random one is generated when omitted.
    holder : str | None
        Account holder name, shown in the account label.

    Returns
    -------
    Result[DepositOnly, InvalidArgumentError]
        ``Ok(account)`` or ``Err(InvalidArgumentError)``. Savings and
        current accounts also satisfy ``Withdrawable``.
    """
    try:
        account_kind = AccountKind(kind.upper() if isinstance(kind, str) else kind)
    except ValueError:
        return Err(InvalidArgumentError(f"Unknown account kind: {kind!r}"))

    try:
        account = ACCOUNT_VARIANTS[account_kind](
            initial_balance, account_id=account_id, holder=holder
        )
    except InvalidArgumentError as e:
        logger.debug("Rejected %s opening balance %r: %s", account_kind.value, initial_balance, e)
        return Err(e)

    logger.debug(
        "Opened %s %s with balance %s", account_kind.value, account.account_id, account.balance
    )
    return Ok(account)
