"""
Commitment reward and tier progression engine.

Pure functions over plain values; no database, cache or request access.
"""
from .multipliers import DEFAULT_STATUS_CURVE, MultiplierResolver
from .rewards import RewardCalculator
from .tiers import LevelUpDetector, TierResolver, active_ladder
from .types import (
    DEFAULT_LOCK_MULTIPLIER, LONG_LOCK_DAYS, SHORT_LOCK_DAYS, CommitmentChoice,
    FlatBonusMultiplier, LevelUpResult, MemberCommitmentState, NoMultiplier,
    RewardBreakdown, StatusBasedMultiplier, StatusTier, TaskMultiplierConfig,
    TaskRewardRule, TierProgress, TierValidationError
)
from .validation import TierConfigValidator

__all__ = [
    'DEFAULT_STATUS_CURVE',
    'DEFAULT_LOCK_MULTIPLIER',
    'LONG_LOCK_DAYS',
    'SHORT_LOCK_DAYS',
    'CommitmentChoice',
    'FlatBonusMultiplier',
    'LevelUpDetector',
    'LevelUpResult',
    'MemberCommitmentState',
    'MultiplierResolver',
    'NoMultiplier',
    'RewardBreakdown',
    'RewardCalculator',
    'StatusBasedMultiplier',
    'StatusTier',
    'TaskMultiplierConfig',
    'TaskRewardRule',
    'TierConfigValidator',
    'TierProgress',
    'TierResolver',
    'TierValidationError',
    'active_ladder',
]
