"""Domain-layer error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import datetime


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidPeriodError(DomainError):
    """Raised when a date period starts after it ends."""

    def __init__(self, start: datetime.date, end: datetime.date) -> None:
        super().__init__(f"Invalid period: start {start} is after end {end}.")
        self.start = start
        self.end = end
