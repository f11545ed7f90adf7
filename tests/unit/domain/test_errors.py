"""Unit tests for domain errors."""

import datetime

from kaddem.domain.errors import DomainError, InvalidPeriodError


def test_invalid_period_error_message():
    """The message names both bounds."""
    err = InvalidPeriodError(datetime.date(2025, 2, 1), datetime.date(2025, 1, 1))
    assert isinstance(err, DomainError)
    assert str(err) == "Invalid period: start 2025-02-01 is after end 2025-01-01."
