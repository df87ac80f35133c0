"""
Result Values

Tagged success/failure values so callers can treat validation and
overdraft failures as ordinary data instead of catching exceptions.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .exceptions import LedgerError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Operation completed; ``value`` holds its output"""
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Operation was refused; ``error`` holds the reason"""
    error: LedgerError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        """Re-raise the captured error"""
        raise self.error


Result = Union[Success[T], Failure]
