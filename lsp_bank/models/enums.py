"""Enumeration types for account entities."""

from enum import Enum


class AccountKind(str, Enum):
    SAVINGS = "SAVINGS"
    CURRENT = "CURRENT"
    FIXED_TERM = "FIXED_TERM"


class TransactionType(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"


class TransactionStatus(str, Enum):
    COMPLETED = "COMPLETED"
    REJECTED = "REJECTED"
