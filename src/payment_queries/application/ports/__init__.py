"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from payment_queries.application.ports.payment_repository import PaymentRepository
from payment_queries.application.ports.time_provider import TimeProvider

__all__ = [
    "PaymentRepository",
    "TimeProvider",
]
