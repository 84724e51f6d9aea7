"""Validation utilities for Tempotime.

This module provides the range checks applied to civil fields given
to explicit constructors and captured by the pattern parser.

This module is not part of the public API.
"""

from __future__ import annotations

from tempotime._internal.calendar import CivilFields, days_in_month
from tempotime.errors import ValidationError


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Args:
        month: The month to validate.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_fields(fields: CivilFields) -> None:
    """Validate that civil fields form a real Gregorian date and time.

    Args:
        fields: The civil fields to check.

    Raises:
        ValidationError: If any field is out of range.
    """
    validate_month(fields.month)
    validate_day(fields.year, fields.month, fields.day)
    for name, value, high in (
        ("hour", fields.hour, 23),
        ("minute", fields.minute, 59),
        ("second", fields.second, 59),
        ("millisecond", fields.millisecond, 999),
    ):
        if value < 0 or value > high:
            raise ValidationError(f"{name} must be between 0 and {high}, got {value}")


__all__ = [
    "validate_month",
    "validate_day",
    "validate_fields",
]
