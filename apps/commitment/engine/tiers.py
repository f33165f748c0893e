"""
Tier resolution and level-up detection over a status tier ladder.
"""
import logging
from decimal import Decimal
from typing import List, Optional, Sequence

from .types import LevelUpResult, StatusTier, TierProgress, to_decimal

logger = logging.getLogger(__name__)

ZERO = Decimal('0')
ONE = Decimal('1')


def active_ladder(tiers: Sequence[StatusTier]) -> List[StatusTier]:
    """Active tiers sorted by threshold, then by sort order"""
    active = [tier for tier in tiers or [] if tier.is_active]
    return sorted(active, key=lambda tier: (to_decimal(tier.min_committed), tier.sort_order))


def clamp01(value: Decimal) -> Decimal:
    return max(ZERO, min(ONE, value))


class TierResolver:
    """Find the tier a cumulative committed total qualifies for"""

    def resolve(self, tiers: Sequence[StatusTier], cumulative_committed) -> TierProgress:
        total = to_decimal(cumulative_committed)
        ladder = active_ladder(tiers)
        if not ladder:
            logger.warning("Tier resolution requested with no active tiers")
            return TierProgress(cumulative_committed=total, current=None,
                                next=None, progress_fraction=ZERO)

        current = None
        for tier in ladder:
            if to_decimal(tier.min_committed) <= total:
                current = tier
        if current is None:
            # Ladder does not start at zero; treat the member as bottom tier.
            logger.debug("Total %s is below every tier, falling back to %s",
                         total, ladder[0].tier_key)
            current = ladder[0]

        next_tier = self._next_tier(ladder, current, total)

        if next_tier is None:
            progress = ZERO
        else:
            floor = to_decimal(current.min_committed)
            span = to_decimal(next_tier.min_committed) - floor
            progress = clamp01((total - floor) / span)

        return TierProgress(cumulative_committed=total, current=current,
                            next=next_tier, progress_fraction=progress)

    @staticmethod
    def _next_tier(ladder, current, total) -> Optional[StatusTier]:
        if current.is_unbounded:
            return None
        threshold = max(total, to_decimal(current.min_committed))
        for tier in ladder:
            if to_decimal(tier.min_committed) > threshold:
                return tier
        return None


class LevelUpDetector:
    """Decide whether a commitment moved a member to a higher tier"""

    def __init__(self, resolver: Optional[TierResolver] = None):
        self.resolver = resolver or TierResolver()

    def detect(self, tiers, committed_before, committed_after) -> LevelUpResult:
        from_tier = self.resolver.resolve(tiers, committed_before).current
        to_tier = self.resolver.resolve(tiers, committed_after).current

        leveled_up = (
            from_tier is not None
            and to_tier is not None
            and to_tier.sort_order > from_tier.sort_order
        )
        if leveled_up:
            logger.info("Level up from %s to %s (%s -> %s)",
                        from_tier.tier_key, to_tier.tier_key,
                        committed_before, committed_after)
        return LevelUpResult(leveled_up=leveled_up, from_tier=from_tier, to_tier=to_tier)
