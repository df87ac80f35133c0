"""
Transaction Module

Immutable record of a single deposit or withdrawal against the account.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum

from .currency import Currency, Numeric, format_amount, to_decimal
from .exceptions import ValidationError
from .results import Failure, Result, Success


class TransactionKind(Enum):
    """Direction of a monetary movement"""
    DEPOSIT = "deposit"        # Money into the account
    WITHDRAWAL = "withdrawal"  # Money out of the account

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Transaction:
    """
    A deposit or withdrawal. Amount is always positive; direction comes
    from ``kind``.
    """
    date: date
    kind: TransactionKind
    amount: Decimal
    memo: str

    def __post_init__(self):
        try:
            amount = to_decimal(self.amount)
        except (InvalidOperation, ValueError):
            raise ValidationError(f"Amount must be a number, got {self.amount!r}") from None

        if amount.is_infinite():
            raise ValidationError("Amount must be finite")
        if amount.is_nan() or amount <= 0:
            raise ValidationError("Amount must be positive")

        object.__setattr__(self, 'amount', amount)

    @classmethod
    def create(
        cls,
        date: date,
        kind: TransactionKind,
        amount: Numeric,
        memo: str
    ) -> Result['Transaction']:
        """Build a transaction, returning a Failure instead of raising"""
        try:
            return Success(cls(date, kind, amount, memo))
        except ValidationError as e:
            return Failure(e)

    @property
    def signed_amount(self) -> Decimal:
        """Amount with sign: positive for deposits, negative for withdrawals"""
        if self.kind == TransactionKind.DEPOSIT:
            return self.amount
        return -self.amount

    @property
    def is_withdrawal(self) -> bool:
        return self.kind == TransactionKind.WITHDRAWAL

    def describe(self, currency: Currency = Currency.USD) -> str:
        """One-line description, e.g. ``2023-10-01 Deposit: $2,000.00 - Paycheck``"""
        return (f"{self.date.isoformat()} {self.kind.label}: "
                f"{format_amount(self.amount, currency)} - {self.memo}")

    def __str__(self) -> str:
        return self.describe()
