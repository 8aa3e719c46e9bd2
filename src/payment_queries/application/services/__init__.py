"""Services - Read-only query APIs built on the ports."""

from payment_queries.application.services.payment_query_service import PaymentQueryService

__all__ = [
    "PaymentQueryService",
]
