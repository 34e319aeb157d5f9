"""
Bank Ledger

An in-memory ledger of savings, checking, premium and student accounts.
Supports deposits, withdrawals, transfers, monthly interest and reports.
"""

__version__ = "0.1.0"

from .models import (
    AccountKind,
    OperationResult,
    ReportLine,
    Transaction,
    TransactionDirection,
    TransactionType,
    TransferResult,
)
from .exceptions import (
    BankLedgerError,
    DuplicateAccountError,
    InvalidArgumentError,
    InvalidInitialStateError,
)
from .accounts import (
    BankAccount,
    CheckingAccount,
    InterestBearing,
    PremiumAccount,
    SavingsAccount,
    StudentAccount,
)
from .bank import Bank
from .cli import main


__all__ = [
    "AccountKind",
    "OperationResult",
    "ReportLine",
    "Transaction",
    "TransactionDirection",
    "TransactionType",
    "TransferResult",
    "BankLedgerError",
    "DuplicateAccountError",
    "InvalidArgumentError",
    "InvalidInitialStateError",
    "BankAccount",
    "CheckingAccount",
    "InterestBearing",
    "PremiumAccount",
    "SavingsAccount",
    "StudentAccount",
    "Bank",
    "main",
]
