"""
Value types shared by the commitment reward and tier progression engine.

Nothing in this package imports Django; the Django app converts its model
instances into these values before calling the engine.
"""
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Dict, Mapping, Optional, Union

SHORT_LOCK_DAYS = 90
LONG_LOCK_DAYS = 360
DEFAULT_LOCK_MULTIPLIER = Decimal('3')

MERCH_CATEGORIES = ('merch', 'merch_tier1', 'merch_tier2', 'merch_tier3')


def round_half_up(value) -> int:
    """Round to the nearest whole reward unit, ties away from zero."""
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def format_amount(value) -> str:
    value = to_decimal(value)
    if value == value.to_integral_value():
        return f'{int(value):,}'
    return f'{value:,}'


def format_factor(value) -> str:
    """Multiplier without trailing zeros, e.g. 1.50 -> '1.5'"""
    return format_amount(to_decimal(value).normalize())


def to_decimal(value, default=Decimal('0')) -> Decimal:
    """Read a value as a Decimal, returning ``default`` when it is not numeric."""
    if isinstance(value, Decimal):
        return value if value.is_finite() else default
    if value is None or isinstance(value, bool):
        return default
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return default
    return result if result.is_finite() else default


@dataclass(frozen=True)
class StatusTier:
    """One rung of the loyalty ladder"""
    tier_key: str
    display_name: str
    min_committed: Decimal
    max_committed: Optional[Decimal] = None  # None means unbounded
    earning_multiplier: Decimal = Decimal('1')
    sort_order: int = 0
    is_active: bool = True
    badge_glyph: str = ''
    badge_color: str = ''

    @property
    def is_unbounded(self) -> bool:
        return self.max_committed is None

    def range_label(self) -> str:
        upper = '∞' if self.max_committed is None else format_amount(self.max_committed)
        return f'{format_amount(self.min_committed)} - {upper}'


@dataclass(frozen=True)
class CommitmentChoice:
    """A candidate lock the member may pick"""
    duration_days: int
    duration_multiplier: Decimal = Decimal('1')

    @classmethod
    def short(cls, days=SHORT_LOCK_DAYS):
        return cls(duration_days=days, duration_multiplier=Decimal('1'))

    @classmethod
    def long(cls, multiplier=DEFAULT_LOCK_MULTIPLIER, days=LONG_LOCK_DAYS):
        return cls(duration_days=days,
                   duration_multiplier=to_decimal(multiplier, DEFAULT_LOCK_MULTIPLIER))

    @property
    def is_long(self) -> bool:
        return self.duration_days >= LONG_LOCK_DAYS

    def unlock_date(self, start: Union[date, datetime]):
        """Date (or datetime) on which a lock started at ``start`` is released."""
        return start + timedelta(days=self.duration_days)


@dataclass(frozen=True)
class NoMultiplier:
    """Task pays its flat amount, the member's own tier multiplier applies"""


@dataclass(frozen=True)
class StatusBasedMultiplier:
    """Task defines its own multiplier per status tier"""
    overrides: Mapping[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class FlatBonusMultiplier:
    """Task applies one multiplier to every member"""
    value: Decimal = Decimal('2')


TaskMultiplierConfig = Union[NoMultiplier, StatusBasedMultiplier, FlatBonusMultiplier]


@dataclass(frozen=True)
class TaskRewardRule:
    """Reward settings of an earning task or bounty"""
    base_amount: Decimal
    category: str = 'general'
    multiplier_config: TaskMultiplierConfig = field(default_factory=NoMultiplier)
    lock_multiplier: Decimal = DEFAULT_LOCK_MULTIPLIER
    requires_long_lock: bool = True

    @property
    def is_merch_category(self) -> bool:
        return (self.category or '').lower() in MERCH_CATEGORIES


@dataclass(frozen=True)
class RewardBreakdown:
    """Result of a reward calculation, with every factor kept for display"""
    base_amount: Decimal
    merch_bonus_factor: Decimal
    lock_multiplier: Decimal
    status_multiplier: Decimal
    final_amount: int
    is_long_commitment: bool = False
    is_merch_category: bool = False
    duration_days: Optional[int] = None
    eligible: bool = True
    tier_name: str = ''

    @property
    def duration_factor(self) -> Decimal:
        # At most one of the two factors differs from 1.
        return self.merch_bonus_factor * self.lock_multiplier

    def describe(self) -> str:
        """Factors for display, e.g. '250 × 3x merch × 1.5x Gold = 1,125 NCTR'"""
        parts = [format_amount(self.base_amount)]
        if self.merch_bonus_factor > 1:
            parts.append(f'{format_factor(self.merch_bonus_factor)}x merch')
        if self.lock_multiplier > 1:
            parts.append(f'{format_factor(self.lock_multiplier)}x lock')
        if self.status_multiplier > 1:
            label = f' {self.tier_name}' if self.tier_name else ''
            parts.append(f'{format_factor(self.status_multiplier)}x{label}')
        return f"{' × '.join(parts)} = {format_amount(self.final_amount)} NCTR"

    def as_dict(self) -> Dict:
        return {
            'base_amount': self.base_amount,
            'merch_bonus_factor': self.merch_bonus_factor,
            'lock_multiplier': self.lock_multiplier,
            'duration_factor': self.duration_factor,
            'status_multiplier': self.status_multiplier,
            'final_amount': self.final_amount,
            'is_long_commitment': self.is_long_commitment,
            'is_merch_category': self.is_merch_category,
            'duration_days': self.duration_days,
            'eligible': self.eligible,
            'description': self.describe(),
        }


@dataclass(frozen=True)
class TierProgress:
    """Where a cumulative committed total sits on the ladder"""
    cumulative_committed: Decimal
    current: Optional[StatusTier]
    next: Optional[StatusTier]
    progress_fraction: Decimal

    @property
    def remaining_to_next(self) -> Decimal:
        if self.next is None:
            return Decimal('0')
        return max(Decimal('0'), self.next.min_committed - self.cumulative_committed)

    @property
    def progress_percent(self) -> int:
        if self.current is not None and self.next is None:
            return 100
        return round_half_up(self.progress_fraction * 100)


@dataclass(frozen=True)
class MemberCommitmentState:
    """Committed total of a member; the tier is always derived from it"""
    cumulative_committed: Decimal

    def current_tier_key(self, tiers, resolver=None) -> Optional[str]:
        from .tiers import TierResolver
        progress = (resolver or TierResolver()).resolve(tiers, self.cumulative_committed)
        return progress.current.tier_key if progress.current else None


@dataclass(frozen=True)
class LevelUpResult:
    """Outcome of comparing the tiers before and after a commitment"""
    leveled_up: bool
    from_tier: Optional[StatusTier]
    to_tier: Optional[StatusTier]


@dataclass(frozen=True)
class TierValidationError:
    """A single problem found in a tier configuration"""
    code: str
    message: str
    tier_key: Optional[str] = None
    conflicting_tier_key: Optional[str] = None

    def __str__(self):
        return self.message
