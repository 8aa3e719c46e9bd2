from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    """Owner of a payment. Referenced, not owned, by Payment."""

    email: str
