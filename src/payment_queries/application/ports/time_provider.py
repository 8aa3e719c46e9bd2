from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


class TimeProvider(ABC):
    """Port for time operations.

    Contract:
    - now() MUST return a timezone-aware datetime
    - now() MUST NOT return naive datetimes under any circumstance

    The timezone of now() decides what "current month" means for
    month-based queries.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware datetime."""
        ...
