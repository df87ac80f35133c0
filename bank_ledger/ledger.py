"""
Account Ledger Engine

Holds the balance and transaction history of a single account. Every
posting goes through apply(), which enforces the overdraft threshold and
updates balance and history together. Statements and reconciliation
reports are read-only views built from the recorded transactions.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator, List, Tuple
import threading

from .config import LedgerConfig
from .currency import Currency, Numeric, format_amount, to_decimal
from .exceptions import OverdraftError
from .logging_config import get_logger, log_action
from .results import Failure, Result, Success
from .transactions import Transaction


DEFAULT_SUSPICIOUS_AMOUNT_THRESHOLD = Decimal('10000')


@dataclass(frozen=True)
class StatementLine:
    """A transaction together with the running balance after it"""
    transaction: Transaction
    running_balance: Decimal


@dataclass(frozen=True)
class Statement:
    """
    Chronological account statement

    Lines are ordered by transaction date (ties keep application order).
    The opening balance is the balance before any recorded transaction.
    """
    opening_balance: Decimal
    lines: Tuple[StatementLine, ...]
    closing_balance: Decimal
    currency: Currency = Currency.USD

    def to_lines(self) -> List[str]:
        """Format the statement as printable lines"""
        def fmt(value: Decimal) -> str:
            return format_amount(value, self.currency)

        output = [
            "ACCOUNT STATEMENT",
            f"Opening Balance: {fmt(self.opening_balance)}",
        ]
        for line in self.lines:
            t = line.transaction
            output.append(
                f"{t.date.isoformat()} {t.kind.label} {fmt(t.amount)} - {t.memo} "
                f"| Balance: {fmt(line.running_balance)}"
            )
        output.append(f"Closing Balance: {fmt(self.closing_balance)}")
        return output


@dataclass(frozen=True)
class ReconciliationReport:
    """
    Result of comparing the ledger balance with a bank statement balance

    ``variance`` is ledger balance minus statement balance: positive when
    the ledger shows more money than the bank. Unpacks as
    ``(variance, suspicious_transactions)``.
    """
    variance: Decimal
    suspicious_transactions: Tuple[str, ...]
    flagged: Tuple[Transaction, ...] = ()
    currency: Currency = Currency.USD

    @property
    def is_balanced(self) -> bool:
        return self.variance == 0

    def __iter__(self) -> Iterator:
        yield self.variance
        yield self.suspicious_transactions

    def to_lines(self) -> List[str]:
        """Format the report as printable lines"""
        output = [
            "RECONCILIATION REPORT",
            f"Variance: {format_amount(self.variance, self.currency)}",
        ]
        if not self.is_balanced:
            output.append("Warning: Account balance doesn't match bank statement")

        if self.suspicious_transactions:
            output.append("")
            output.append("SUSPICIOUS TRANSACTIONS:")
            output.extend(f"- {description}" for description in self.suspicious_transactions)
        return output


class AccountLedger:
    """
    Ledger for one account: balance plus ordered transaction history

    The balance always equals the opening balance plus the signed amounts
    of every applied transaction.
    """

    def __init__(
        self,
        opening_balance: Numeric,
        overdraft_threshold: Numeric = Decimal('0'),
        suspicious_amount_threshold: Numeric = DEFAULT_SUSPICIOUS_AMOUNT_THRESHOLD,
        currency: Currency = Currency.USD
    ):
        self.opening_balance = to_decimal(opening_balance)
        self.overdraft_threshold = to_decimal(overdraft_threshold)
        self.suspicious_amount_threshold = to_decimal(suspicious_amount_threshold)
        self.currency = currency

        self._balance = self.opening_balance
        self._transactions: List[Transaction] = []
        self._lock = threading.RLock()
        self.logger = get_logger("bank_ledger.ledger")

    @classmethod
    def from_config(cls, config: LedgerConfig) -> 'AccountLedger':
        """Build a ledger from configuration values"""
        return cls(
            opening_balance=config.opening_balance_amount,
            overdraft_threshold=config.overdraft_threshold_amount,
            suspicious_amount_threshold=config.suspicious_threshold_amount,
            currency=config.display_currency
        )

    @property
    def balance(self) -> Decimal:
        """Current balance"""
        with self._lock:
            return self._balance

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        """Applied transactions in application order"""
        with self._lock:
            return tuple(self._transactions)

    def _fmt(self, value: Decimal) -> str:
        return format_amount(value, self.currency)

    def apply(self, transaction: Transaction) -> Transaction:
        """
        Record a transaction and update the balance

        Withdrawals that would leave the balance below the overdraft
        threshold are refused; the ledger is left untouched in that case.
        Deposits are always accepted.

        Args:
            transaction: Transaction to record

        Returns:
            The recorded transaction

        Raises:
            OverdraftError: If a withdrawal would breach the overdraft threshold
        """
        with self._lock:
            if transaction.is_withdrawal and \
                    (self._balance - transaction.amount) < self.overdraft_threshold:
                error = OverdraftError(
                    available=self._balance,
                    attempted=transaction.amount,
                    message=(f"Overdraft prevented! Available: {self._fmt(self._balance)}, "
                             f"Attempted withdrawal: {self._fmt(transaction.amount)}")
                )
                log_action(
                    self.logger, "warning", "Withdrawal rejected: overdraft threshold",
                    action="reject_transaction", resource=f"transaction:{transaction.kind.value}",
                    extra={
                        "amount": str(transaction.amount),
                        "available": str(self._balance),
                        "overdraft_threshold": str(self.overdraft_threshold),
                        "memo": transaction.memo
                    }
                )
                raise error

            self._transactions.append(transaction)
            self._balance += transaction.signed_amount
            balance = self._balance

        log_action(
            self.logger, "info", f"Transaction applied: {transaction.kind.value}",
            action="apply_transaction", resource=f"transaction:{transaction.kind.value}",
            extra={
                "date": transaction.date.isoformat(),
                "amount": str(transaction.amount),
                "memo": transaction.memo,
                "balance": str(balance)
            }
        )
        return transaction

    def try_apply(self, transaction: Transaction) -> Result[Transaction]:
        """Like apply(), but returns a Failure instead of raising on overdraft"""
        try:
            return Success(self.apply(transaction))
        except OverdraftError as e:
            return Failure(e)

    def reconcile(self, statement_ending_balance: Numeric) -> ReconciliationReport:
        """
        Compare the ledger balance with a bank statement's ending balance

        Transactions whose amount strictly exceeds the suspicious-amount
        threshold are listed in the order they were applied.

        Args:
            statement_ending_balance: Ending balance reported by the bank

        Returns:
            ReconciliationReport with variance and suspicious transactions
        """
        statement_ending_balance = to_decimal(statement_ending_balance)

        with self._lock:
            balance = self._balance
            transactions = list(self._transactions)

        variance = balance - statement_ending_balance
        threshold = self.suspicious_amount_threshold
        flagged = tuple(t for t in transactions if t.amount > threshold)
        suspicious = tuple(
            f"Suspicious transaction: {t.describe(self.currency)} "
            f"(Amount exceeds {self._fmt(threshold)} threshold)"
            for t in flagged
        )

        report = ReconciliationReport(
            variance=variance,
            suspicious_transactions=suspicious,
            flagged=flagged,
            currency=self.currency
        )

        level = "info" if report.is_balanced and not flagged else "warning"
        log_action(
            self.logger, level, "Reconciliation completed",
            action="reconcile", resource="ledger",
            extra={
                "ledger_balance": str(balance),
                "statement_balance": str(statement_ending_balance),
                "variance": str(variance),
                "suspicious_count": len(flagged)
            }
        )
        return report

    def statement(self) -> Statement:
        """
        Build the chronological statement

        The opening balance is reconstructed as the current balance minus
        all signed amounts, then transactions are walked in date order.
        """
        with self._lock:
            balance = self._balance
            transactions = list(self._transactions)

        running_balance = balance - sum((t.signed_amount for t in transactions), Decimal('0'))
        opening_balance = running_balance

        lines = []
        for t in sorted(transactions, key=lambda t: t.date):
            running_balance += t.signed_amount
            lines.append(StatementLine(transaction=t, running_balance=running_balance))

        return Statement(
            opening_balance=opening_balance,
            lines=tuple(lines),
            closing_balance=running_balance,
            currency=self.currency
        )

    def render_statement(self) -> List[str]:
        """Statement as printable lines: header, opening, entries, closing"""
        return self.statement().to_lines()
