"""Custom exception hierarchy for lsp-bank."""

from decimal import Decimal


class LspBankError(Exception):
    """Base exception for all lsp-bank errors."""


class InvalidArgumentError(LspBankError, ValueError):
    """Raised when an amount or opening balance would break the account invariant."""


class InsufficientFundsError(LspBankError):
    """Raised when a withdrawal would drive the balance below zero."""

    def __init__(self, balance: Decimal, amount: Decimal, label: str = "account") -> None:
        self.balance = balance
        self.amount = amount
        self.label = label
        super().__init__(f"Insufficient funds in {label}: balance {balance}, requested {amount}")


class UnsupportedOperationError(LspBankError):
    """Raised by an account that refuses an operation its type advertises."""


class ContractViolationError(LspBankError):
    """Raised when an account variant is not substitutable for its capability."""

    def __init__(self, subject: str, violations: list[str]) -> None:
        self.subject = subject
        self.violations = violations
        super().__init__(f"{subject} violates its contract: " + "; ".join(violations))


class ConfigurationError(LspBankError):
    """Raised when configuration is invalid or missing."""


class SinkError(LspBankError):
    """Raised when a sink operation fails."""
