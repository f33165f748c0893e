"""
Commitment-related validators.
"""
from django.conf import settings
from rest_framework import serializers


def validate_lock_days(value):
    """
    Validate a lock duration (must be one of the supported lock options).

    Args:
        value: Lock duration in days

    Raises:
        serializers.ValidationError: If the duration is not offered

    Returns:
        int: Validated lock duration
    """
    allowed = (settings.COMMITMENT_SHORT_LOCK_DAYS, settings.COMMITMENT_LONG_LOCK_DAYS)
    if value not in allowed:
        raise serializers.ValidationError(
            f"Lock duration must be one of: {', '.join(str(days) for days in allowed)} days."
        )
    return value


def validate_earning_multiplier(value):
    """Validate a tier earning multiplier (never below 1)."""
    if value < 1:
        raise serializers.ValidationError("Earning multiplier must be at least 1.")
    return value
