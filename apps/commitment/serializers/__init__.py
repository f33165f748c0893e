"""
Commitment serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .tier_serializers import (
    StatusTierSerializer, TierValueSerializer, TierEditSerializer,
    TierValidationErrorSerializer
)
from .progress_serializers import (
    TierProgressSerializer, RewardBreakdownSerializer, LevelUpSerializer
)
from .task_serializers import (
    EarningTaskSerializer, CommitRequestSerializer, CommitmentLogListSerializer
)

__all__ = [
    'StatusTierSerializer',
    'TierValueSerializer',
    'TierEditSerializer',
    'TierValidationErrorSerializer',
    'TierProgressSerializer',
    'RewardBreakdownSerializer',
    'LevelUpSerializer',
    'EarningTaskSerializer',
    'CommitRequestSerializer',
    'CommitmentLogListSerializer',
]
