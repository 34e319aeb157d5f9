"""
Data models for the bank ledger.

This module contains the transaction record, the enums describing account
kinds and transaction types, and the result objects returned by operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum
from typing import Optional, Tuple

CENTS = Decimal('0.01')


def to_decimal(value) -> Decimal:
    """Convert int, float or str input to a finite Decimal.

    Raises:
        InvalidOperation: if the input is not a number, or is NaN or infinite
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    if not value.is_finite():
        raise InvalidOperation(f"Amount must be finite: {value}")
    return value


def quantize_cents(value: Decimal) -> Decimal:
    """Round a Decimal to cents."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


class AccountKind(Enum):
    """Kinds of bank accounts."""
    SAVINGS = "savings"
    CHECKING = "checking"
    PREMIUM = "premium"
    STUDENT = "student"

    @property
    def interest_bearing(self) -> bool:
        """Whether accounts of this kind accrue monthly interest."""
        return self in (AccountKind.SAVINGS, AccountKind.PREMIUM)

    @property
    def label(self) -> str:
        return self.value.capitalize()


class TransactionDirection(Enum):
    """Direction of a balance change."""
    CREDIT = "Credit"
    DEBIT = "Debit"


class TransactionType(Enum):
    """Types of transactions."""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    TRANSFER_IN = "transfer_in"
    TRANSFER_OUT = "transfer_out"
    INTEREST = "interest"
    FEE = "fee"


@dataclass(frozen=True)
class Transaction:
    """Represents one balance change recorded on an account."""

    timestamp: datetime
    direction: TransactionDirection
    amount: Decimal
    reason: str
    balance_after: Decimal
    transaction_type: TransactionType = TransactionType.DEPOSIT
    related_account: Optional[str] = None  # For transfers

    @property
    def delta(self) -> Decimal:
        """Signed amount this transaction added to the balance."""
        if self.direction is TransactionDirection.DEBIT:
            return -self.amount
        return self.amount


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a deposit, withdrawal or interest operation."""

    success: bool
    message: str = ""
    transactions: Tuple[Transaction, ...] = field(default_factory=tuple)

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, *transactions: Transaction, message: str = "") -> "OperationResult":
        return cls(True, message, tuple(transactions))

    @classmethod
    def rejected(cls, message: str) -> "OperationResult":
        return cls(False, message)


@dataclass(frozen=True)
class TransferResult:
    """Outcome of a transfer between two accounts."""

    success: bool
    from_account: str
    to_account: str
    amount: Decimal
    message: str = ""
    withdrawal: Optional[OperationResult] = None
    deposit: Optional[OperationResult] = None

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True)
class ReportLine:
    """One row of the bank report."""

    account_number: str
    holder_name: str
    balance: Decimal
