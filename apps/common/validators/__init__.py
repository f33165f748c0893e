"""
Common validators module.

All validators are exported from this module to maintain backward compatibility.
"""
from .commitment_validators import validate_lock_days, validate_earning_multiplier

__all__ = [
    'validate_lock_days',
    'validate_earning_multiplier',
]
