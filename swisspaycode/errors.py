"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           swisspaycode/errors.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Validation outcome types. Input problems are returned as
                ValidationFailure values wrapped in an Outcome; exceptions
                are reserved for callers that explicitly unwrap and for
                encoder defects.
------------------------------------------------------------------------------
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from swisspaycode.models.types import AddressRole

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Category of a validation failure."""
    ACCOUNT = "ACCOUNT"
    REFERENCE = "REFERENCE"
    ADDRESS = "ADDRESS"
    AMOUNT = "AMOUNT"
    CURRENCY = "CURRENCY"
    MESSAGE = "MESSAGE"
    RECORD = "RECORD"


@dataclass(frozen=True)
class ValidationFailure:
    """
    Data container for a single rejected input.

    Attributes:
        kind: The failure category.
        message: Human readable reason.
        field: Offending field name, if any.
        role: Address role (Creditor/Debtor) for address failures.
    """

    kind: ErrorKind
    message: str
    field: Optional[str] = None
    role: Optional[AddressRole] = None

    def __str__(self) -> str:
        if self.role is not None:
            return f"{self.role.value}: {self.message}"
        return self.message


class PaymentCodeError(ValueError):
    """Raised by Outcome.unwrap() when the outcome holds a failure."""

    def __init__(self, failure: ValidationFailure) -> None:
        super().__init__(str(failure))
        self.failure = failure


class PayloadShapeError(AssertionError):
    """The assembled payload violates the fixed line layout. Always a bug."""


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Either a value or a ValidationFailure, never both.
    """

    value: Optional[T] = None
    failure: Optional[ValidationFailure] = None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def fail(
        cls,
        kind: ErrorKind,
        message: str,
        field: Optional[str] = None,
        role: Optional[AddressRole] = None,
    ) -> "Outcome[T]":
        return cls(failure=ValidationFailure(kind, message, field, role))

    @classmethod
    def from_failure(cls, failure: ValidationFailure) -> "Outcome[T]":
        return cls(failure=failure)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> T:
        """
        Returns the value.

        Raises:
            PaymentCodeError: If the outcome is a failure.
        """
        if self.failure is not None:
            raise PaymentCodeError(self.failure)
        return self.value  # type: ignore[return-value]
