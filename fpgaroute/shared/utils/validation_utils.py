"""Validation utilities for fpgaroute."""
import logging
from typing import Any

from ..exceptions import ValidationError


def validate_positive_number(value: Any, field_name: str) -> None:
    """Validate that a value is a positive number.

    Args:
        value: Value to validate
        field_name: Name of field for error reporting

    Raises:
        ValidationError: If value is not a positive number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            f"{field_name} must be numeric, got {type(value)}",
            field=field_name, value=value
        )

    if value <= 0:
        raise ValidationError(
            f"{field_name} must be positive, got {value}",
            field=field_name, value=value
        )


def validate_non_negative_number(value: Any, field_name: str) -> None:
    """Validate that a value is a non-negative number.

    Args:
        value: Value to validate
        field_name: Name of field for error reporting

    Raises:
        ValidationError: If value is not non-negative
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            f"{field_name} must be numeric, got {type(value)}",
            field=field_name, value=value
        )

    if value < 0:
        raise ValidationError(
            f"{field_name} must be non-negative, got {value}",
            field=field_name, value=value
        )


def validate_log_level(level: Any, field_name: str = "level") -> None:
    """Validate a logging level name such as ``"INFO"``.

    Raises:
        ValidationError: If the name is not a standard logging level
    """
    if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
        raise ValidationError(
            f"{field_name} must be a logging level name, got {level!r}",
            field=field_name, value=level
        )
