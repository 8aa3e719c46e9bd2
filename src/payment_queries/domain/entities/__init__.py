"""Domain entities - Objects with identity, read from a repository."""

from payment_queries.domain.entities.payment import Payment
from payment_queries.domain.entities.payment_item import PaymentItem
from payment_queries.domain.entities.user import User

__all__ = [
    "Payment",
    "PaymentItem",
    "User",
]
