"""Value objects - Immutable objects defined by their attributes."""

from payment_queries.domain.value_objects.payment_id import PaymentId
from payment_queries.domain.value_objects.year_month import YearMonth

__all__ = [
    "PaymentId",
    "YearMonth",
]
