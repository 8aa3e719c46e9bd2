"""Domain exceptions for payment-queries.

Exception hierarchy:
    DomainException (base)
    └── InvalidArgumentError (also a ValueError)
        ├── InvalidPaymentIdError
        ├── InvalidYearMonthError
        └── InvalidPaymentError

Empty query results are never errors. Failures raised by the repository or
the time provider are not wrapped; they propagate to the caller unchanged.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from collaborator errors.
    """


class InvalidArgumentError(DomainException, ValueError):
    """Raised when a query or factory receives a malformed argument.

    Examples:
        - negative day count for a "last N days" query
        - a threshold that is not an integer
        - a year-month that is not a YearMonth

    Raised before any collaborator is consulted, so a failing call
    never reads the repository.
    """


class InvalidPaymentIdError(InvalidArgumentError):
    """Raised when a payment ID is not a valid UUID."""


class InvalidYearMonthError(InvalidArgumentError):
    """Raised when a year-month has an out-of-range month or year,
    or cannot be parsed from its YYYY-MM form."""


class InvalidPaymentError(InvalidArgumentError):
    """Raised by Payment.create() for a payment without items
    or with a naive payment date."""
