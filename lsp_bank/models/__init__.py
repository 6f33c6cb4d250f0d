"""Domain models for lsp-bank."""

from lsp_bank.models.enums import AccountKind, TransactionStatus, TransactionType
from lsp_bank.models.report import AccountSnapshot, TransactionReport
from lsp_bank.models.result import Err, Ok, Result

__all__ = [
    "AccountKind",
    "AccountSnapshot",
    "Err",
    "Ok",
    "Result",
    "TransactionReport",
    "TransactionStatus",
    "TransactionType",
]
