"""
Ledger Exceptions

Errors raised by transaction construction and ledger posting.
"""

from decimal import Decimal


class LedgerError(Exception):
    """Base class for all ledger errors"""


class ValidationError(LedgerError, ValueError):
    """Raised when a transaction is constructed with invalid data"""


class OverdraftError(LedgerError):
    """
    Raised when a withdrawal would take the balance below the overdraft threshold

    Carries the balance available at the time of the attempt and the
    withdrawal amount that was refused.
    """

    def __init__(self, available: Decimal, attempted: Decimal, message: str):
        super().__init__(message)
        self.available = available
        self.attempted = attempted
