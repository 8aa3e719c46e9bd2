"""Read-only queries and aggregates over a snapshot of payments."""

from payment_queries.application.ports import PaymentRepository, TimeProvider
from payment_queries.application.services import PaymentQueryService
from payment_queries.bootstrap import create_payment_query_service
from payment_queries.domain.entities import Payment, PaymentItem, User
from payment_queries.domain.exceptions import DomainException, InvalidArgumentError
from payment_queries.domain.value_objects import PaymentId, YearMonth

__all__ = [
    "DomainException",
    "InvalidArgumentError",
    "Payment",
    "PaymentId",
    "PaymentItem",
    "PaymentQueryService",
    "PaymentRepository",
    "TimeProvider",
    "User",
    "YearMonth",
    "create_payment_query_service",
]
