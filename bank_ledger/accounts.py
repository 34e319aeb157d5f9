"""
Account types for the bank ledger.

This module contains the abstract BankAccount base, the InterestBearing
capability and the four account variants. Every balance change goes through
BankAccount._change_balance, which also records the transaction.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Callable, List, Optional, Tuple

from .exceptions import InvalidArgumentError, InvalidInitialStateError
from .models import (
    AccountKind,
    OperationResult,
    Transaction,
    TransactionDirection,
    TransactionType,
    quantize_cents,
    to_decimal,
)
from .reporting import format_currency

Clock = Callable[[], datetime]


class BankAccount(ABC):
    """Base class for all account variants."""

    kind: AccountKind

    def __init__(self, account_number: str, holder_name: str,
                 initial_balance=Decimal('0.00'), *, clock: Optional[Clock] = None):
        """Initialize account and validate its opening balance."""
        if not isinstance(account_number, str) or not account_number.strip():
            raise InvalidArgumentError("Account number cannot be empty")

        try:
            balance = to_decimal(initial_balance)
        except InvalidOperation:
            raise InvalidArgumentError(f"Invalid initial balance: {initial_balance}")

        if balance < 0:
            raise InvalidInitialStateError("Initial balance cannot be negative")
        self._check_initial_balance(balance)

        self._account_number = account_number
        self._holder_name = self._clean_name(holder_name)
        self._balance = balance
        self._initial_balance = balance
        self._transactions: List[Transaction] = []
        self._clock = clock or datetime.now
        self.logger = logging.getLogger(__name__)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(account_number={self._account_number!r}, "
                f"holder_name={self._holder_name!r}, balance={self._balance})")

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @holder_name.setter
    def holder_name(self, name: str):
        self._holder_name = self._clean_name(name)

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def initial_balance(self) -> Decimal:
        return self._initial_balance

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        """Transaction log, oldest first."""
        return tuple(self._transactions)

    @staticmethod
    def _clean_name(name: str) -> str:
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError("Holder name cannot be empty")
        return name.strip()

    @staticmethod
    def _validate_amount(amount, operation: str) -> Decimal:
        """Convert amount to Decimal and reject non-positive values."""
        try:
            value = to_decimal(amount)
        except InvalidOperation:
            raise InvalidArgumentError(f"Invalid amount: {amount}")

        if value <= 0:
            raise InvalidArgumentError(f"{operation} amount must be positive")
        return value

    def _check_initial_balance(self, balance: Decimal):
        """Hook for variants with opening balance limits."""

    def _change_balance(self, amount: Decimal, reason: str,
                        transaction_type: TransactionType,
                        related_account: Optional[str] = None) -> Transaction:
        """Add a signed amount to the balance and record the transaction.

        Only account variants call this; it is the single place where the
        balance and the transaction log change.
        """
        self._balance += amount
        direction = TransactionDirection.CREDIT if amount >= 0 else TransactionDirection.DEBIT
        transaction = Transaction(
            timestamp=self._clock(),
            direction=direction,
            amount=abs(amount),
            reason=reason,
            balance_after=self._balance,
            transaction_type=transaction_type,
            related_account=related_account
        )
        self._transactions.append(transaction)
        return transaction

    @abstractmethod
    def can_deposit(self, amount: Decimal) -> OperationResult:
        """Check whether a deposit is allowed without performing it."""

    @abstractmethod
    def can_withdraw(self, amount: Decimal) -> OperationResult:
        """Check whether a withdrawal is allowed without performing it."""

    def _after_withdrawal(self) -> Tuple[Transaction, ...]:
        """Hook run after a successful withdrawal; returns extra records."""
        return ()

    def deposit(self, amount, *, transfer_from: Optional[str] = None) -> OperationResult:
        """Deposit money to the account.

        Args:
            amount: Positive amount to credit
            transfer_from: Source account number when called by a transfer

        Returns:
            OperationResult with the recorded transaction, or a rejection
        """
        value = self._validate_amount(amount, "Deposit")

        check = self.can_deposit(value)
        if not check:
            self.logger.warning(f"Deposit to {self._account_number} rejected: {check.message}")
            return check

        if transfer_from is None:
            transaction = self._change_balance(
                value, f"{self.kind.label} deposit", TransactionType.DEPOSIT)
        else:
            transaction = self._change_balance(
                value, f"Transfer in from {transfer_from}",
                TransactionType.TRANSFER_IN, transfer_from)

        self.logger.info(f"Deposited {format_currency(value)} to {self._account_number}")
        return OperationResult.ok(transaction)

    def withdraw(self, amount, *, transfer_to: Optional[str] = None) -> OperationResult:
        """Withdraw money from the account.

        Args:
            amount: Positive amount to debit
            transfer_to: Destination account number when called by a transfer

        Returns:
            OperationResult with the recorded transactions, or a rejection
        """
        value = self._validate_amount(amount, "Withdrawal")

        check = self.can_withdraw(value)
        if not check:
            self.logger.warning(f"Withdrawal from {self._account_number} rejected: {check.message}")
            return check

        if transfer_to is None:
            transaction = self._change_balance(
                -value, f"{self.kind.label} withdrawal", TransactionType.WITHDRAWAL)
        else:
            transaction = self._change_balance(
                -value, f"Transfer out to {transfer_to}",
                TransactionType.TRANSFER_OUT, transfer_to)

        self.logger.info(f"Withdrawn {format_currency(value)} from {self._account_number}")
        return OperationResult.ok(transaction, *self._after_withdrawal())

    def display_info(self) -> List[str]:
        """Summary lines reflecting the current account state."""
        return [
            f"Account: {self._account_number}",
            f"Holder: {self._holder_name}",
            f"Balance: {format_currency(self._balance)}",
        ]


class InterestBearing:
    """Capability for accounts that accrue monthly interest."""

    ANNUAL_INTEREST_RATE = Decimal('0.00')

    def calculate_interest(self) -> Decimal:
        """Monthly interest on the current balance, rounded to cents."""
        return quantize_cents(self.balance * self.ANNUAL_INTEREST_RATE / 12)

    def apply_interest(self) -> OperationResult:
        """Credit one month of interest if it is positive."""
        interest = self.calculate_interest()
        if interest <= 0:
            return OperationResult.ok(message="No interest to apply")

        transaction = self._change_balance(
            interest, f"{self.kind.label} monthly interest", TransactionType.INTEREST)
        self.logger.info(f"Applied interest {format_currency(interest)} to {self.account_number}")
        return OperationResult.ok(transaction)


class SavingsAccount(InterestBearing, BankAccount):
    """Savings account with a monthly withdrawal limit."""

    kind = AccountKind.SAVINGS
    MIN_BALANCE = Decimal('500.00')
    ANNUAL_INTEREST_RATE = Decimal('0.02')
    WITHDRAWAL_LIMIT_PER_MONTH = 3

    def __init__(self, account_number: str, holder_name: str,
                 initial_balance=Decimal('0.00'), *, clock: Optional[Clock] = None):
        super().__init__(account_number, holder_name, initial_balance, clock=clock)
        self._monthly_withdrawals = 0

    @property
    def monthly_withdrawals(self) -> int:
        return self._monthly_withdrawals

    def _check_initial_balance(self, balance: Decimal):
        if balance < self.MIN_BALANCE:
            raise InvalidInitialStateError(
                f"Savings account requires minimum {format_currency(self.MIN_BALANCE)}")

    def can_deposit(self, amount: Decimal) -> OperationResult:
        return OperationResult.ok()

    def can_withdraw(self, amount: Decimal) -> OperationResult:
        if self._monthly_withdrawals >= self.WITHDRAWAL_LIMIT_PER_MONTH:
            return OperationResult.rejected("Monthly withdrawal limit reached")
        if amount > self.balance:
            return OperationResult.rejected("Insufficient funds")
        return OperationResult.ok()

    def _after_withdrawal(self) -> Tuple[Transaction, ...]:
        self._monthly_withdrawals += 1
        return ()

    def reset_monthly_counters(self):
        """Start a new withdrawal cycle."""
        self._monthly_withdrawals = 0


class CheckingAccount(BankAccount):
    """Checking account allowing overdraft for a fixed fee."""

    kind = AccountKind.CHECKING
    OVERDRAFT_FEE = Decimal('35.00')

    def can_deposit(self, amount: Decimal) -> OperationResult:
        return OperationResult.ok()

    def can_withdraw(self, amount: Decimal) -> OperationResult:
        return OperationResult.ok()

    def _after_withdrawal(self) -> Tuple[Transaction, ...]:
        if self.balance >= 0:
            return ()

        fee = self._change_balance(-self.OVERDRAFT_FEE, "Overdraft fee", TransactionType.FEE)
        self.logger.info(
            f"Account {self.account_number} went negative: "
            f"overdraft fee {format_currency(self.OVERDRAFT_FEE)} charged")
        return (fee,)


class PremiumAccount(InterestBearing, BankAccount):
    """High balance account with a higher interest rate."""

    kind = AccountKind.PREMIUM
    MIN_BALANCE = Decimal('10000.00')
    ANNUAL_INTEREST_RATE = Decimal('0.05')

    def _check_initial_balance(self, balance: Decimal):
        if balance < self.MIN_BALANCE:
            raise InvalidInitialStateError(
                f"Premium account requires minimum {format_currency(self.MIN_BALANCE)}")

    def can_deposit(self, amount: Decimal) -> OperationResult:
        return OperationResult.ok()

    def can_withdraw(self, amount: Decimal) -> OperationResult:
        if amount > self.balance:
            return OperationResult.rejected("Insufficient funds")
        return OperationResult.ok()


class StudentAccount(BankAccount):
    """Student account with a balance cap."""

    kind = AccountKind.STUDENT
    MAX_BALANCE = Decimal('5000.00')

    def _check_initial_balance(self, balance: Decimal):
        if balance > self.MAX_BALANCE:
            raise InvalidInitialStateError(
                f"Initial balance exceeds student account maximum of {format_currency(self.MAX_BALANCE)}")

    def can_deposit(self, amount: Decimal) -> OperationResult:
        if self.balance + amount > self.MAX_BALANCE:
            return OperationResult.rejected(
                f"Deposit would exceed student account maximum of {format_currency(self.MAX_BALANCE)}")
        return OperationResult.ok()

    def can_withdraw(self, amount: Decimal) -> OperationResult:
        if amount > self.balance:
            return OperationResult.rejected("Insufficient funds")
        return OperationResult.ok()
