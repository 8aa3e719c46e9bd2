from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from payment_queries.application.ports import PaymentRepository

if TYPE_CHECKING:
    from collections.abc import Iterable

    from payment_queries.domain.entities import Payment
    from payment_queries.domain.value_objects import PaymentId


class InMemoryPaymentRepository(PaymentRepository):
    """In-memory payment repository for tests and embedding.

    Implementation notes:
    - Uses dict with PaymentId as key; insertion order is the find_all() order
    - save() of an existing id replaces it in place (keeps its position)
    - Returns a deep-copied tuple from find_all() to mimic database detachment
    - Stores deep copies in save() to prevent external mutation
    - NOT thread-safe; concurrent save() and find_all() need external locking

    Deepcopy assumptions:
    - All entities and value objects must be deepcopy-safe (frozen dataclasses are)
    - Decimal and aware datetime values survive deepcopy unchanged
    """

    def __init__(self, payments: Iterable[Payment] = ()) -> None:
        self._payments: dict[PaymentId, Payment] = {}
        self.save_all(payments)

    def find_all(self) -> tuple[Payment, ...]:
        return copy.deepcopy(tuple(self._payments.values()))

    def save(self, payment: Payment) -> None:
        """Persist a payment (upsert semantics)."""
        self._payments[payment.id] = copy.deepcopy(payment)

    def save_all(self, payments: Iterable[Payment]) -> None:
        for payment in payments:
            self.save(payment)
