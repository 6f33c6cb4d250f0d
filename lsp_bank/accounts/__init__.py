"""Account capabilities, variants and construction."""

from lsp_bank.accounts.balance import Amount, Balance, to_amount
from lsp_bank.accounts.capabilities import DepositOnly, Withdrawable
from lsp_bank.accounts.factory import ACCOUNT_VARIANTS, create_account
from lsp_bank.accounts.variants import CurrentAccount, FixedTermAccount, SavingsAccount

__all__ = [
    "ACCOUNT_VARIANTS",
    "Amount",
    "Balance",
    "CurrentAccount",
    "DepositOnly",
    "FixedTermAccount",
    "SavingsAccount",
    "Withdrawable",
    "create_account",
    "to_amount",
]
