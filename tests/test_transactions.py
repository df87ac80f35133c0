"""
Test suite for transactions module

Tests Transaction validation, signed amounts, immutability and the
result-returning constructor.
"""

import dataclasses
import pytest
from decimal import Decimal
from datetime import date

from bank_ledger.currency import Currency
from bank_ledger.exceptions import LedgerError, ValidationError
from bank_ledger.results import Failure, Success
from bank_ledger.transactions import Transaction, TransactionKind


class TestTransaction:
    """Test transaction construction and derived values"""

    def test_valid_deposit(self):
        """Test creation of a valid deposit"""
        t = Transaction(date(2023, 10, 1), TransactionKind.DEPOSIT, Decimal('2000.00'), "Paycheck")

        assert t.date == date(2023, 10, 1)
        assert t.kind == TransactionKind.DEPOSIT
        assert t.amount == Decimal('2000.00')
        assert t.memo == "Paycheck"
        assert not t.is_withdrawal

    @pytest.mark.parametrize("amount", [Decimal('0'), Decimal('0.00'), Decimal('-0.01'), Decimal('-500'), 0, -1])
    def test_non_positive_amount_rejected(self, amount):
        """Test that zero and negative amounts fail validation"""
        with pytest.raises(ValidationError, match="Amount must be positive"):
            Transaction(date(2023, 10, 1), TransactionKind.DEPOSIT, amount, "Bad")

    def test_validation_error_is_value_error(self):
        """ValidationError stays catchable as ValueError and LedgerError"""
        with pytest.raises(ValueError):
            Transaction(date(2023, 10, 1), TransactionKind.WITHDRAWAL, Decimal('0'), "Bad")
        with pytest.raises(LedgerError):
            Transaction(date(2023, 10, 1), TransactionKind.WITHDRAWAL, Decimal('-1'), "Bad")

    def test_non_numeric_amount_rejected(self):
        """Test that an unparseable amount fails validation"""
        with pytest.raises(ValidationError, match="must be a number"):
            Transaction(date(2023, 10, 1), TransactionKind.DEPOSIT, "lots", "Bad")

    def test_nan_amount_rejected(self):
        with pytest.raises(ValidationError):
            Transaction(date(2023, 10, 1), TransactionKind.DEPOSIT, Decimal('NaN'), "Bad")

    def test_amount_coerced_to_decimal(self):
        """Test that int and str amounts become Decimal"""
        t_int = Transaction(date(2023, 10, 1), TransactionKind.DEPOSIT, 250, "Cash")
        t_str = Transaction(date(2023, 10, 1), TransactionKind.DEPOSIT, "99.95", "Cash")

        assert isinstance(t_int.amount, Decimal)
        assert t_int.amount == Decimal('250')
        assert t_str.amount == Decimal('99.95')

    @pytest.mark.parametrize("amount", [Decimal('Infinity'), Decimal('-Infinity'), "inf"])
    def test_infinite_amount_rejected(self, amount):
        with pytest.raises(ValidationError, match="Amount must be finite"):
            Transaction(date(2023, 10, 1), TransactionKind.DEPOSIT, amount, "Bad")

    def test_no_upper_bound_on_amount(self):
        t = Transaction(date(2023, 10, 1), TransactionKind.DEPOSIT, Decimal('1e15'), "Lottery")
        assert t.amount == Decimal('1e15')

    def test_signed_amount(self):
        """Deposits are positive, withdrawals negative"""
        deposit = Transaction(date(2023, 10, 1), TransactionKind.DEPOSIT, Decimal('100'), "In")
        withdrawal = Transaction(date(2023, 10, 1), TransactionKind.WITHDRAWAL, Decimal('40'), "Out")

        assert deposit.signed_amount == Decimal('100')
        assert withdrawal.signed_amount == Decimal('-40')
        assert withdrawal.is_withdrawal

    def test_immutable(self):
        """Transactions cannot be changed once constructed"""
        t = Transaction(date(2023, 10, 1), TransactionKind.DEPOSIT, Decimal('100'), "In")

        with pytest.raises(dataclasses.FrozenInstanceError):
            t.amount = Decimal('1000000')

    def test_describe(self):
        t = Transaction(date(2023, 10, 1), TransactionKind.DEPOSIT, Decimal('2000'), "Paycheck")

        assert str(t) == "2023-10-01 Deposit: $2,000.00 - Paycheck"
        assert t.describe(Currency.EUR) == "2023-10-01 Deposit: €2,000.00 - Paycheck"

    def test_withdrawal_label(self):
        t = Transaction(date(2023, 10, 3), TransactionKind.WITHDRAWAL, Decimal('500'), "Rent payment")
        assert str(t) == "2023-10-03 Withdrawal: $500.00 - Rent payment"


class TestTransactionCreate:
    """Test the result-returning constructor"""

    def test_create_success(self):
        result = Transaction.create(date(2023, 10, 1), TransactionKind.DEPOSIT, Decimal('10'), "Gift")

        assert isinstance(result, Success)
        assert result.ok
        assert result.unwrap().amount == Decimal('10')

    def test_create_failure(self):
        result = Transaction.create(date(2023, 10, 1), TransactionKind.DEPOSIT, Decimal('-10'), "Gift")

        assert isinstance(result, Failure)
        assert not result.ok
        assert isinstance(result.error, ValidationError)
        assert str(result.error) == "Amount must be positive"

    def test_failure_unwrap_raises(self):
        result = Transaction.create(date(2023, 10, 1), TransactionKind.DEPOSIT, 0, "Gift")

        with pytest.raises(ValidationError):
            result.unwrap()
