from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class PaymentItem:
    """A priced line of a payment.

    Prices are exact decimals. final_price is the price actually paid and is
    normally not above regular_price; that relation is not enforced here.
    """

    name: str
    regular_price: Decimal
    final_price: Decimal

    @property
    def discount(self) -> Decimal:
        """Amount knocked off the regular price (negative for a surcharge)."""
        return self.regular_price - self.final_price
