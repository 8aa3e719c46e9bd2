"""Payment entity: a dated, user-owned list of priced items.

Payments are read-only snapshots handed out by a PaymentRepository.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from payment_queries.domain.exceptions import InvalidPaymentError
from payment_queries.domain.value_objects import PaymentId

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from payment_queries.domain.entities.payment_item import PaymentItem
    from payment_queries.domain.entities.user import User
    from payment_queries.domain.value_objects import YearMonth


@dataclass(frozen=True, slots=True)
class Payment:
    """Payment entity.

    Payment is immutable (frozen dataclass) and hashable, so payments can be
    collected into sets; two payments are equal when every field is equal.

    Items are an ordered tuple exclusively owned by the payment. The user is
    a back-reference only.

    Use the create() factory method to construct instances with validation.
    Direct construction trusts the caller (typically a repository adapter).
    """

    id: PaymentId
    payment_date: datetime
    items: tuple[PaymentItem, ...]
    user: User

    @classmethod
    def create(
        cls,
        payment_date: datetime,
        items: Iterable[PaymentItem],
        user: User,
        payment_id: PaymentId | None = None,
    ) -> Payment:
        """Factory method to create a Payment with validation.

        Args:
            payment_date: When the payment happened; must be timezone-aware.
            items: Priced lines, at least one. Order is preserved.
            user: The paying user.
            payment_id: Identifier to use; a new one is generated if omitted.

        Returns:
            A new Payment instance.

        Raises:
            InvalidPaymentError: If payment_date is naive or items is empty.
        """
        if payment_date.tzinfo is None or payment_date.utcoffset() is None:
            raise InvalidPaymentError(
                f"payment_date must be timezone-aware, got naive {payment_date.isoformat()}"
            )

        items = tuple(items)
        if not items:
            raise InvalidPaymentError("Payment must contain at least one item")

        return cls(
            id=payment_id if payment_id is not None else PaymentId.generate(),
            payment_date=payment_date,
            items=items,
            user=user,
        )

    def total_final_price(self) -> Decimal:
        """Exact sum of final prices; Decimal("0") when there are no items."""
        return sum((item.final_price for item in self.items), Decimal("0"))

    def total_discount(self) -> Decimal:
        """Exact sum of per-item discounts."""
        return sum((item.discount for item in self.items), Decimal("0"))

    def is_in_month(self, year_month: YearMonth) -> bool:
        """Check the payment date's own calendar year and month.

        The date is not converted to any other timezone first.
        """
        return year_month.contains(self.payment_date)
