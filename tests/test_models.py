"""
Tests for the models module.

This module contains tests for the enums, the Transaction record and the
result objects.
"""

import pytest
from dataclasses import FrozenInstanceError
from datetime import datetime
from decimal import Decimal, InvalidOperation

from bank_ledger.models import (
    AccountKind,
    OperationResult,
    Transaction,
    TransactionDirection,
    TransactionType,
    TransferResult,
    quantize_cents,
    to_decimal,
)


class TestAccountKind:
    """Test AccountKind enum."""

    def test_account_kinds(self):
        """Test all account kind values."""
        assert AccountKind.SAVINGS.value == "savings"
        assert AccountKind.CHECKING.value == "checking"
        assert AccountKind.PREMIUM.value == "premium"
        assert AccountKind.STUDENT.value == "student"

    def test_interest_bearing_kinds(self):
        """Only savings and premium accounts accrue interest."""
        assert AccountKind.SAVINGS.interest_bearing is True
        assert AccountKind.PREMIUM.interest_bearing is True
        assert AccountKind.CHECKING.interest_bearing is False
        assert AccountKind.STUDENT.interest_bearing is False

    def test_label(self):
        """Test display label used in transaction reasons."""
        assert AccountKind.SAVINGS.label == "Savings"
        assert AccountKind.STUDENT.label == "Student"


class TestTransactionType:
    """Test TransactionType enum."""

    def test_transaction_types(self):
        """Test all transaction type values."""
        assert TransactionType.DEPOSIT.value == "deposit"
        assert TransactionType.WITHDRAWAL.value == "withdrawal"
        assert TransactionType.TRANSFER_IN.value == "transfer_in"
        assert TransactionType.TRANSFER_OUT.value == "transfer_out"
        assert TransactionType.INTEREST.value == "interest"
        assert TransactionType.FEE.value == "fee"


class TestDecimalHelpers:
    """Test decimal conversion helpers."""

    def test_to_decimal_conversion(self):
        """Test conversion from str, float and int."""
        assert to_decimal("1500.50") == Decimal('1500.50')
        assert to_decimal(2500.75) == Decimal('2500.75')
        assert to_decimal(3000) == Decimal('3000')

    def test_to_decimal_keeps_decimal(self):
        """Decimal input is returned unchanged."""
        value = Decimal('12.345')
        assert to_decimal(value) is value

    @pytest.mark.parametrize("value", [float('nan'), float('inf'), Decimal('NaN'), "Infinity", "abc"])
    def test_to_decimal_rejects_non_finite(self, value):
        """Test conversion of values that are not finite numbers."""
        with pytest.raises(InvalidOperation):
            to_decimal(value)

    def test_quantize_cents_rounds_half_up(self):
        """Test rounding to two decimal places."""
        assert quantize_cents(Decimal('1.585')) == Decimal('1.59')
        assert quantize_cents(Decimal('1.58333')) == Decimal('1.58')
        assert quantize_cents(Decimal('2')) == Decimal('2.00')


class TestTransaction:
    """Test Transaction record."""

    @pytest.fixture
    def credit(self):
        return Transaction(
            timestamp=datetime(2024, 1, 15, 10, 30),
            direction=TransactionDirection.CREDIT,
            amount=Decimal('200.00'),
            reason="Savings deposit",
            balance_after=Decimal('1200.00')
        )

    def test_credit_delta_is_positive(self, credit):
        """Test signed delta of a credit."""
        assert credit.delta == Decimal('200.00')

    def test_debit_delta_is_negative(self):
        """Test signed delta of a debit."""
        debit = Transaction(
            timestamp=datetime(2024, 1, 15, 10, 30),
            direction=TransactionDirection.DEBIT,
            amount=Decimal('35.00'),
            reason="Overdraft fee",
            balance_after=Decimal('-135.00'),
            transaction_type=TransactionType.FEE
        )
        assert debit.delta == Decimal('-35.00')

    def test_defaults(self, credit):
        """Test default transaction type and related account."""
        assert credit.transaction_type == TransactionType.DEPOSIT
        assert credit.related_account is None

    def test_transaction_is_immutable(self, credit):
        """Recorded transactions cannot be modified."""
        with pytest.raises(FrozenInstanceError):
            credit.amount = Decimal('1.00')


class TestResults:
    """Test operation and transfer results."""

    def test_ok_result_is_truthy(self):
        """Test successful result."""
        result = OperationResult.ok()
        assert result.success is True
        assert bool(result) is True
        assert result.transactions == ()

    def test_rejected_result_is_falsy(self):
        """Test rejected result carries a message."""
        result = OperationResult.rejected("Insufficient funds")
        assert result.success is False
        assert not result
        assert result.message == "Insufficient funds"
        assert result.transactions == ()

    def test_transfer_result_truthiness(self):
        """Test TransferResult boolean value follows success."""
        failed = TransferResult(False, 'A', 'B', Decimal('10.00'), "One or both accounts not found")
        assert not failed
        assert failed.withdrawal is None
        assert failed.deposit is None
