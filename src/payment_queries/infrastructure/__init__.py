"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: In-memory payment repository
- Time Provider: Clock abstraction for testability
- Configuration: Environment-driven settings and logging setup

Infrastructure adapters implement the ports defined in the application layer.
"""

from payment_queries.infrastructure.config import QuerySettings
from payment_queries.infrastructure.logging_config import configure_logging
from payment_queries.infrastructure.payment_repository import InMemoryPaymentRepository
from payment_queries.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "FixedTimeProvider",
    "InMemoryPaymentRepository",
    "QuerySettings",
    "SystemTimeProvider",
    "configure_logging",
]
