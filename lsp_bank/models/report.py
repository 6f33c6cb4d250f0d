"""Transaction report model handed to sinks."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from lsp_bank.models.enums import TransactionStatus, TransactionType


@dataclass
class TransactionReport:
    """Observable outcome of a single deposit or withdrawal.

    ``balance`` is the balance after the operation, which for a rejected
    withdrawal is the unchanged balance.
    """

    account_id: str
    label: str
    transaction_type: TransactionType
    amount: Decimal
    balance: Decimal
    status: TransactionStatus
    reason: str | None = None
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def succeeded(self) -> bool:
        return self.status == TransactionStatus.COMPLETED

    @property
    def message(self) -> str:
        """Human-readable line describing the outcome."""
        if not self.succeeded:
            return f"Insufficient funds in {self.label}!"
        if self.transaction_type == TransactionType.DEPOSIT:
            return f"Deposited: {self.amount} in {self.label}. New Balance: {self.balance}"
        return f"Withdrawn: {self.amount} from {self.label}. New Balance: {self.balance}"


@dataclass
class AccountSnapshot:
    """Closing state of one account, exported after a run."""

    account_id: str
    label: str
    withdrawable: bool
    balance: Decimal

    @property
    def message(self) -> str:
        return f"{self.label}: balance {self.balance}"
