"""
Bank Mini Ledger

Single-account ledger with overdraft protection, chronological statements
and reconciliation against bank statement balances. All financial math
uses Decimal.
"""

__version__ = "1.0.0"
