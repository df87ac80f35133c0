#!/usr/bin/env python3
"""
Bank Mini Ledger Entry Point

Replays a sample month on a fresh ledger, prints the account statement
and reconciles it against the bank's ending balance.
"""

import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from bank_ledger.config import get_config
from bank_ledger.exceptions import LedgerError
from bank_ledger.ledger import AccountLedger
from bank_ledger.logging_config import setup_logging
from bank_ledger.transactions import Transaction, TransactionKind


STATEMENT_ENDING_BALANCE = Decimal('2400')


def main() -> int:
    config = get_config()
    setup_logging(config.log_level, log_format=config.log_format)

    try:
        ledger = AccountLedger(
            Decimal('1000'),
            overdraft_threshold=Decimal('-500'),
            suspicious_amount_threshold=Decimal('5000'),
            currency=config.display_currency
        )

        ledger.apply(Transaction(
            date(2023, 10, 1),
            TransactionKind.DEPOSIT,
            Decimal('2000'),
            "Paycheck"))

        ledger.apply(Transaction(
            date(2023, 10, 3),
            TransactionKind.WITHDRAWAL,
            Decimal('500'),
            "Rent payment"))

        for line in ledger.render_statement():
            print(line)

        print()
        for line in ledger.reconcile(STATEMENT_ENDING_BALANCE).to_lines():
            print(line)
    except LedgerError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
