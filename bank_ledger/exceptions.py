"""
Exceptions for the bank ledger.

Argument validation errors are raised; business-rule rejections such as
insufficient funds are reported through result objects instead.
"""


class BankLedgerError(Exception):
    """Base exception for all bank ledger errors."""


class InvalidArgumentError(BankLedgerError, ValueError):
    """An operation argument is invalid (non-positive amount, empty name)."""


class InvalidInitialStateError(BankLedgerError, ValueError):
    """An account cannot be constructed with the given opening balance."""


class DuplicateAccountError(BankLedgerError):
    """An account with the same number is already registered."""

    def __init__(self, account_number: str):
        super().__init__(f"Account number already exists: {account_number!r}")
        self.account_number = account_number
