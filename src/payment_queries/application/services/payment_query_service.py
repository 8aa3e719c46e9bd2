from __future__ import annotations

import logging
from datetime import UTC, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING

from payment_queries.domain.exceptions import InvalidArgumentError
from payment_queries.domain.value_objects import YearMonth

if TYPE_CHECKING:
    from collections.abc import Sequence, Sized
    from datetime import datetime

    from payment_queries.application.ports import PaymentRepository, TimeProvider
    from payment_queries.domain.entities import Payment, PaymentItem

logger = logging.getLogger(__name__)


class PaymentQueryService:
    """Read-only queries and aggregates over the payment snapshot.

    Every query:
    - Validates its arguments first (InvalidArgumentError, nothing is read)
    - Reads the full snapshot from the repository exactly once
    - Reads the clock at most once, so one call sees a single "now"
    - Filters, transforms or aggregates in memory and returns a new container

    Results never share mutable state with the service; the service holds no
    state between calls beyond its two collaborators. Repository and time
    provider errors propagate unchanged.

    Month membership uses the payment date's own calendar fields, not the
    date converted to the clock's timezone.
    """

    def __init__(
        self,
        payment_repository: PaymentRepository,
        time_provider: TimeProvider,
    ) -> None:
        self._payment_repo = payment_repository
        self._time_provider = time_provider

    def list_payments_by_date_descending(self) -> list[Payment]:
        """Return all payments, newest first.

        The sort is stable: payments with equal dates keep their
        repository order.
        """
        payments = self._snapshot()
        result = sorted(payments, key=_instant_of, reverse=True)
        self._log_query("list_payments_by_date_descending", payments, result)
        return result

    def list_payments_for_current_month(self) -> list[Payment]:
        """Return payments made in the clock's current calendar month."""
        payments = self._snapshot()
        current_month = self._current_month()
        result = [payment for payment in payments if payment.is_in_month(current_month)]
        self._log_query("list_payments_for_current_month", payments, result)
        return result

    def list_payments_for_month(self, year_month: YearMonth) -> list[Payment]:
        """Return payments made in the given calendar month.

        Raises:
            InvalidArgumentError: If year_month is not a YearMonth.
        """
        self._require_year_month(year_month)
        payments = self._snapshot()
        result = self._payments_in_month(payments, year_month)
        self._log_query("list_payments_for_month", payments, result)
        return result

    def list_payments_for_last_days(self, days: int) -> list[Payment]:
        """Return payments made strictly after now minus `days` calendar days.

        A payment dated exactly at the cut-off is excluded. days=0 keeps only
        payments dated after the current instant.

        Raises:
            InvalidArgumentError: If days is not a non-negative int.
        """
        self._require_int("days", days)
        if days < 0:
            raise InvalidArgumentError(f"days must be non-negative, got {days}")

        payments = self._snapshot()
        now = self._time_provider.now()
        # Wall-clock arithmetic resets fold; keep the reading's side of a repeated hour
        cutoff = (now - timedelta(days=days)).replace(fold=now.fold).astimezone(UTC)
        result = [payment for payment in payments if _instant_of(payment) > cutoff]
        self._log_query("list_payments_for_last_days", payments, result)
        return result

    def set_of_payments_with_single_item(self) -> set[Payment]:
        """Return the distinct payments that have exactly one item."""
        payments = self._snapshot()
        result = {payment for payment in payments if len(payment.items) == 1}
        self._log_query("set_of_payments_with_single_item", payments, result)
        return result

    def set_of_product_names_sold_in_current_month(self) -> set[str]:
        """Return the distinct item names sold in the clock's current month."""
        payments = self._snapshot()
        current_month = self._current_month()
        result = {
            item.name
            for payment in self._payments_in_month(payments, current_month)
            for item in payment.items
        }
        self._log_query("set_of_product_names_sold_in_current_month", payments, result)
        return result

    def sum_of_final_prices_for_month(self, year_month: YearMonth) -> Decimal:
        """Return the exact total paid in the given month.

        Returns:
            Sum of final prices of all items; Decimal("0") for an empty month.

        Raises:
            InvalidArgumentError: If year_month is not a YearMonth.
        """
        self._require_year_month(year_month)
        payments = self._snapshot()
        total = sum(
            (
                payment.total_final_price()
                for payment in self._payments_in_month(payments, year_month)
            ),
            Decimal("0"),
        )
        logger.debug(
            "sum_of_final_prices_for_month(%s): %d payments scanned, total=%s",
            year_month,
            len(payments),
            total,
        )
        return total

    def sum_of_discounts_for_month(self, year_month: YearMonth) -> Decimal:
        """Return the exact total discount granted in the given month.

        Returns:
            Sum of (regular_price - final_price) over all items;
            Decimal("0") for an empty month.

        Raises:
            InvalidArgumentError: If year_month is not a YearMonth.
        """
        self._require_year_month(year_month)
        payments = self._snapshot()
        total = sum(
            (
                payment.total_discount()
                for payment in self._payments_in_month(payments, year_month)
            ),
            Decimal("0"),
        )
        logger.debug(
            "sum_of_discounts_for_month(%s): %d payments scanned, total=%s",
            year_month,
            len(payments),
            total,
        )
        return total

    def items_for_user_email(self, email: str) -> list[PaymentItem]:
        """Return all items bought by the user with exactly this email.

        Matching is case-sensitive. Items come in payment order, then in
        item order within each payment.

        Raises:
            InvalidArgumentError: If email is not a str.
        """
        if not isinstance(email, str):
            raise InvalidArgumentError(f"email must be a str, got {type(email).__name__}")

        payments = self._snapshot()
        result = [
            item for payment in payments if payment.user.email == email for item in payment.items
        ]
        self._log_query("items_for_user_email", payments, result)
        return result

    def set_of_payments_with_total_over(self, threshold: int) -> set[Payment]:
        """Return the distinct payments whose final total is strictly above threshold.

        Raises:
            InvalidArgumentError: If threshold is not an int.
        """
        self._require_int("threshold", threshold)
        limit = Decimal(threshold)

        payments = self._snapshot()
        result = {payment for payment in payments if payment.total_final_price() > limit}
        self._log_query("set_of_payments_with_total_over", payments, result)
        return result

    def _snapshot(self) -> tuple[Payment, ...]:
        """Read the repository once and freeze the result for this call."""
        return tuple(self._payment_repo.find_all())

    def _current_month(self) -> YearMonth:
        return YearMonth.from_datetime(self._time_provider.now())

    @staticmethod
    def _payments_in_month(payments: Sequence[Payment], year_month: YearMonth) -> list[Payment]:
        return [payment for payment in payments if payment.is_in_month(year_month)]

    @staticmethod
    def _require_year_month(year_month: object) -> None:
        if not isinstance(year_month, YearMonth):
            raise InvalidArgumentError(
                f"year_month must be a YearMonth, got {type(year_month).__name__}"
            )

    @staticmethod
    def _require_int(name: str, value: object) -> None:
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")

    @staticmethod
    def _log_query(operation: str, payments: Sequence[Payment], result: Sized) -> None:
        logger.debug(
            "%s: %d payments scanned, %d results",
            operation,
            len(payments),
            len(result),
        )


def _instant_of(payment: Payment) -> datetime:
    """Payment date as a UTC instant.

    Aware datetimes sharing a tzinfo compare by wall clock and ignore fold,
    so dates are normalised before ordering or cut-off checks.
    """
    return payment.payment_date.astimezone(UTC)
