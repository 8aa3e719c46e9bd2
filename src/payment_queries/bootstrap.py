"""Wiring helpers for applications embedding the query service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from payment_queries.application.services import PaymentQueryService
from payment_queries.infrastructure.config import QuerySettings
from payment_queries.infrastructure.time_provider import SystemTimeProvider

if TYPE_CHECKING:
    from payment_queries.application.ports import PaymentRepository, TimeProvider

logger = logging.getLogger(__name__)


def create_payment_query_service(
    payment_repository: PaymentRepository,
    settings: QuerySettings | None = None,
    time_provider: TimeProvider | None = None,
) -> PaymentQueryService:
    """Build a PaymentQueryService over the given repository.

    Args:
        payment_repository: Source of the payment snapshot.
        settings: Settings to use; loaded from the environment if omitted.
        time_provider: Clock to use; defaults to the system clock in
            the configured timezone.

    Returns:
        A ready-to-use PaymentQueryService.
    """
    if time_provider is None:
        settings = settings if settings is not None else QuerySettings()
        time_provider = SystemTimeProvider(settings.zone)
        logger.debug("Using system clock in timezone %s", settings.timezone)

    return PaymentQueryService(
        payment_repository=payment_repository,
        time_provider=time_provider,
    )
