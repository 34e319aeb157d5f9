"""
Bank ledger for the bank management system.

This module contains the Bank class, which registers accounts and runs the
operations spanning several of them: transfers, the monthly interest batch
and the balance report.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional

from .accounts import BankAccount
from .exceptions import DuplicateAccountError
from .models import AccountKind, ReportLine, TransferResult, to_decimal
from .reporting import format_currency


class Bank:
    """Registry of accounts keyed by account number."""

    def __init__(self):
        """Initialize an empty bank."""
        self._accounts: Dict[str, BankAccount] = {}
        self.logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_number: str) -> bool:
        return account_number in self._accounts

    def create_account(self, account: BankAccount) -> str:
        """Register an account and return its number."""
        if account.account_number in self._accounts:
            raise DuplicateAccountError(account.account_number)

        self._accounts[account.account_number] = account
        self.logger.info(f"Registered {account.kind.value} account {account.account_number}")
        return account.account_number

    def find_account(self, account_number: str) -> Optional[BankAccount]:
        """Get account by account number."""
        return self._accounts.get(account_number)

    def accounts(self) -> List[BankAccount]:
        """Get all accounts in registration order."""
        return list(self._accounts.values())

    def total_balance(self) -> Decimal:
        return sum((account.balance for account in self._accounts.values()), Decimal('0.00'))

    def transfer(self, from_account_number: str, to_account_number: str, amount) -> TransferResult:
        """Transfer money between accounts.

        Both sides are checked before either is touched, so a rejected
        transfer leaves both balances and transaction logs unchanged.
        """
        try:
            value = to_decimal(amount)
        except InvalidOperation:
            return self._transfer_failed(from_account_number, to_account_number,
                                         Decimal('0.00'), f"Invalid amount: {amount}")

        from_account = self.find_account(from_account_number)
        to_account = self.find_account(to_account_number)

        if from_account is None or to_account is None:
            return self._transfer_failed(from_account_number, to_account_number, value,
                                         "One or both accounts not found")
        if value <= 0:
            return self._transfer_failed(from_account_number, to_account_number, value,
                                         "Transfer amount must be positive")
        if from_account is to_account:
            return self._transfer_failed(from_account_number, to_account_number, value,
                                         "Cannot transfer to the same account")

        check = from_account.can_withdraw(value)
        if not check:
            return self._transfer_failed(from_account_number, to_account_number, value,
                                         f"Source account: {check.message}")
        check = to_account.can_deposit(value)
        if not check:
            return self._transfer_failed(from_account_number, to_account_number, value,
                                         f"Destination account: {check.message}")

        withdrawal = from_account.withdraw(value, transfer_to=to_account_number)
        deposit = to_account.deposit(value, transfer_from=from_account_number)

        self.logger.info(
            f"Transfer {format_currency(value)} from {from_account_number} to {to_account_number}")
        return TransferResult(
            success=withdrawal.success and deposit.success,
            from_account=from_account_number,
            to_account=to_account_number,
            amount=value,
            withdrawal=withdrawal,
            deposit=deposit
        )

    def _transfer_failed(self, from_account_number: str, to_account_number: str,
                         amount: Decimal, message: str) -> TransferResult:
        self.logger.warning(f"Transfer failed: {message}")
        return TransferResult(
            success=False,
            from_account=from_account_number,
            to_account=to_account_number,
            amount=amount,
            message=message
        )

    def apply_monthly_interest_to_all(self) -> Dict[str, Decimal]:
        """Apply monthly interest and start a new savings withdrawal cycle.

        Returns:
            Interest credited per interest-bearing account number
        """
        applied = {}
        for account in self._accounts.values():
            if account.kind.interest_bearing:
                result = account.apply_interest()
                applied[account.account_number] = sum(
                    (txn.amount for txn in result.transactions), Decimal('0.00'))

            if account.kind is AccountKind.SAVINGS:
                account.reset_monthly_counters()

        return applied

    def generate_report(self) -> List[ReportLine]:
        """Balance report for all accounts in registration order."""
        return [
            ReportLine(
                account_number=account.account_number,
                holder_name=account.holder_name,
                balance=account.balance
            )
            for account in self._accounts.values()
        ]
