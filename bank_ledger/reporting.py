"""
Text formatting for the bank ledger.

Domain objects never print; these helpers turn them into display lines.
"""

from decimal import Decimal
from typing import Iterable, List

from .models import ReportLine, Transaction, quantize_cents

REPORT_HEADER = "--- Bank Accounts Report ---"
REPORT_FOOTER = "--- End of Report ---"


def format_currency(amount: Decimal) -> str:
    """Format currency for display."""
    amount = quantize_cents(amount)
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


def format_transaction(transaction: Transaction) -> str:
    return (
        f"{transaction.timestamp.isoformat()} | "
        f"{transaction.direction.value} | "
        f"{format_currency(transaction.amount)} | "
        f"{transaction.reason} | "
        f"Balance: {format_currency(transaction.balance_after)}"
    )


def format_report_line(line: ReportLine) -> str:
    return (
        f"Account: {line.account_number} | "
        f"Holder: {line.holder_name} | "
        f"Balance: {format_currency(line.balance)}"
    )


def format_report(lines: Iterable[ReportLine]) -> List[str]:
    """Full report block with header and footer."""
    return [REPORT_HEADER, *(format_report_line(line) for line in lines), REPORT_FOOTER]


def format_history(account_number: str, transactions: Iterable[Transaction]) -> List[str]:
    """Transaction history block for one account."""
    return [
        f"--- Transaction history for {account_number} ---",
        *(format_transaction(txn) for txn in transactions),
    ]
