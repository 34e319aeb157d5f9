"""
CLI interface for the bank ledger.

This module provides a command-line demonstration of the account types and
the bank ledger. All state lives in memory for the duration of one command.
"""

import click
import logging
from decimal import Decimal
from typing import Optional

from .accounts import (
    BankAccount,
    CheckingAccount,
    Clock,
    PremiumAccount,
    SavingsAccount,
    StudentAccount,
)
from .bank import Bank
from .models import OperationResult, TransferResult
from .reporting import format_currency, format_history, format_report

DEMO_ACCOUNTS = (
    (SavingsAccount, 'SAV1001', 'Alice', '1000.00'),
    (CheckingAccount, 'CHK2001', 'Bob', '200.00'),
    (PremiumAccount, 'PRM3001', 'Carol', '15000.00'),
    (StudentAccount, 'STD4001', 'Dave', '100.00'),
)

DEMO_OPERATIONS = (
    ('deposit', 'SAV1001', '200.00'),
    ('withdraw', 'SAV1001', '100.00'),
    ('withdraw', 'SAV1001', '100.00'),
    ('withdraw', 'SAV1001', '50.00'),
    ('withdraw', 'SAV1001', '10.00'),
    ('withdraw', 'CHK2001', '300.00'),
    ('deposit', 'STD4001', '4900.00'),
    ('deposit', 'STD4001', '100.00'),
)

DEMO_TRANSFERS = (
    ('PRM3001', 'CHK2001', '500.00'),
)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


class BankCLI:
    """CLI wrapper for bank operations."""

    def __init__(self, clock: Optional[Clock] = None):
        """Initialize CLI with an empty bank."""
        self.bank = Bank()
        self.clock = clock

    def open_demo_accounts(self):
        """Create and register the demonstration accounts."""
        for account_class, number, holder, balance in DEMO_ACCOUNTS:
            account = account_class(number, holder, Decimal(balance), clock=self.clock)
            self.bank.create_account(account)

    def run_operation(self, operation: str, account_number: str, amount: Decimal) -> OperationResult:
        """Run a deposit or withdrawal on a registered account."""
        account = self.bank.find_account(account_number)
        if account is None:
            raise ValueError(f"Account not found: {account_number}")

        if operation == 'deposit':
            return account.deposit(amount)
        if operation == 'withdraw':
            return account.withdraw(amount)
        raise ValueError(f"Unknown operation: {operation}")

    def echo_operation(self, operation: str, account_number: str, amount: Decimal,
                       result: OperationResult):
        """Echo the outcome of a deposit or withdrawal."""
        if not result:
            click.echo(f"❌ {operation.capitalize()} of {format_currency(amount)} "
                       f"on {account_number} failed: {result.message}", err=True)
            return

        direction = 'to' if operation == 'deposit' else 'from'
        verb = 'Deposited' if operation == 'deposit' else 'Withdrawn'
        click.echo(f"✅ {verb} {format_currency(amount)} {direction} {account_number}")
        for extra in result.transactions[1:]:
            click.echo(f"⚠️ {extra.reason}: {format_currency(extra.amount)} charged")

    def echo_transfer(self, result: TransferResult):
        if not result:
            click.echo(f"❌ Transfer of {format_currency(result.amount)} from "
                       f"{result.from_account} to {result.to_account} failed: {result.message}",
                       err=True)
            return

        click.echo(f"✅ Transfer {format_currency(result.amount)} from "
                   f"{result.from_account} to {result.to_account}")

    def echo_account(self, account: BankAccount):
        for line in account.display_info():
            click.echo(line)


@click.group()
@click.option('--log-level', default='WARNING',
              type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help='Logging level')
@click.pass_context
def cli(ctx, log_level):
    """Bank Ledger CLI"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    ctx.ensure_object(dict)
    ctx.obj['cli'] = BankCLI()


@cli.command()
@click.option('--months', default=1, type=click.IntRange(min=0),
              help='Number of monthly interest cycles to apply')
@click.option('--history', 'history_account', default='SAV1001',
              help='Account number whose transaction history is shown')
@click.pass_context
def demo(ctx, months, history_account):
    """Run the demonstration scenario and print the report."""
    bank_cli = ctx.obj['cli']
    bank_cli.open_demo_accounts()

    account = bank_cli.bank.find_account(history_account)
    if account is None:
        click.echo(f"❌ Account not found: {history_account}", err=True)
        ctx.exit(1)

    click.echo("📋 Accounts")
    for registered in bank_cli.bank.accounts():
        bank_cli.echo_account(registered)

    click.echo("\n💰 Operations")
    for operation, account_number, amount in DEMO_OPERATIONS:
        value = Decimal(amount)
        result = bank_cli.run_operation(operation, account_number, value)
        bank_cli.echo_operation(operation, account_number, value, result)

    for from_account, to_account, amount in DEMO_TRANSFERS:
        bank_cli.echo_transfer(bank_cli.bank.transfer(from_account, to_account, Decimal(amount)))

    for month in range(1, months + 1):
        applied = bank_cli.bank.apply_monthly_interest_to_all()
        for account_number, interest in applied.items():
            click.echo(f"💎 Month {month}: interest {format_currency(interest)} "
                       f"credited to {account_number}")

    click.echo("")
    for line in format_report(bank_cli.bank.generate_report()):
        click.echo(line)

    click.echo("")
    for line in format_history(account.account_number, account.transactions):
        click.echo(line)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
