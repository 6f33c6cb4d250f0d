"""
lsp_bank - substitutable bank account capabilities

Account variants that can be used interchangeably wherever their
capability is expected, plus the checks that prove it.

Usage:
    from lsp_bank import AccountKind, BankClient, create_account

    savings = create_account(AccountKind.SAVINGS, 0).unwrap()
    fixed = create_account(AccountKind.FIXED_TERM, 0).unwrap()

    client = BankClient([savings], [fixed])
    for report in client.process_transactions():
        print(report.message)
"""

from lsp_bank.accounts import (
    ACCOUNT_VARIANTS,
    Amount,
    Balance,
    CurrentAccount,
    DepositOnly,
    FixedTermAccount,
    SavingsAccount,
    Withdrawable,
    create_account,
    to_amount,
)
from lsp_bank.client import BankClient
from lsp_bank.config import ClientConfig, LspBankConfig
from lsp_bank.contracts import (
    assert_substitutable,
    check_deposit_only,
    check_invariant,
    check_withdrawable,
)
from lsp_bank.exceptions import (
    ConfigurationError,
    ContractViolationError,
    InsufficientFundsError,
    InvalidArgumentError,
    LspBankError,
    SinkError,
    UnsupportedOperationError,
)
from lsp_bank.models import (
    AccountKind,
    Err,
    Ok,
    Result,
    TransactionReport,
    TransactionStatus,
    TransactionType,
)

__all__ = [
    # Accounts
    "ACCOUNT_VARIANTS", "Amount", "Balance", "CurrentAccount", "DepositOnly",
    "FixedTermAccount", "SavingsAccount", "Withdrawable", "create_account", "to_amount",
    # Client
    "BankClient", "ClientConfig", "LspBankConfig",
    # Contracts
    "assert_substitutable", "check_deposit_only", "check_invariant", "check_withdrawable",
    # Errors
    "ConfigurationError", "ContractViolationError", "InsufficientFundsError",
    "InvalidArgumentError", "LspBankError", "SinkError", "UnsupportedOperationError",
    # Models
    "AccountKind", "Err", "Ok", "Result", "TransactionReport", "TransactionStatus",
    "TransactionType",
]

__version__ = "0.1.0"
