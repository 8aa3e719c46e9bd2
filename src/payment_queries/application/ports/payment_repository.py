from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from payment_queries.domain.entities import Payment


class PaymentRepository(ABC):
    """Port for reading the known payments.

    Contract:
    - find_all() returns a snapshot: later changes to the store must not
      show up in a sequence that was already returned
    - Returned payments are treated as read-only by every caller
    - An empty store yields an empty sequence (no exception)
    - Failures (I/O, connectivity) are raised as-is; callers do not retry

    Thread safety note:
    Queries may call find_all() from several threads. Serializing access,
    if the backing store needs it, is the implementation's job.
    """

    @abstractmethod
    def find_all(self) -> Sequence[Payment]:
        """Return every payment currently known, in a stable order.

        Returns:
            An ordered snapshot of Payment entities.
        """
