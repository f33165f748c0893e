"""
Validation of status tier threshold configuration.

Errors are returned, never raised, so an admin screen can show every
conflict at once and decide for itself whether to block the save.
"""
import logging
from decimal import Decimal
from typing import List, Sequence

from .tiers import active_ladder
from .types import StatusTier, TierValidationError, format_amount, to_decimal

logger = logging.getLogger(__name__)

INFINITY = Decimal('Infinity')

INVALID_RANGE = 'invalid_range'
NEGATIVE_MINIMUM = 'negative_minimum'
INVALID_MULTIPLIER = 'invalid_multiplier'
RANGE_OVERLAP = 'range_overlap'
MULTIPLIER_REGRESSION = 'multiplier_regression'
RANGE_GAP = 'range_gap'
LADDER_FLOOR = 'ladder_floor'
UNBOUNDED_COUNT = 'unbounded_count'


def upper_bound(tier: StatusTier) -> Decimal:
    if tier.max_committed is None:
        return INFINITY
    return to_decimal(tier.max_committed)


def ranges_overlap(first: StatusTier, second: StatusTier) -> bool:
    """Half-open ranges overlap; ranges that only touch do not"""
    return (to_decimal(first.min_committed) < upper_bound(second)
            and upper_bound(first) > to_decimal(second.min_committed))


class TierConfigValidator:
    """Check a tier edit against itself and the rest of the ladder"""

    def validate(self, candidate: StatusTier, others: Sequence[StatusTier],
                 include_inactive=False) -> List[TierValidationError]:
        errors = []
        minimum = to_decimal(candidate.min_committed)

        if candidate.max_committed is not None and minimum >= to_decimal(candidate.max_committed):
            errors.append(TierValidationError(
                code=INVALID_RANGE,
                message='Minimum NCTR must be less than maximum NCTR',
                tier_key=candidate.tier_key,
            ))

        if minimum < 0:
            errors.append(TierValidationError(
                code=NEGATIVE_MINIMUM,
                message='Minimum NCTR cannot be negative',
                tier_key=candidate.tier_key,
            ))

        if to_decimal(candidate.earning_multiplier, Decimal('1')) < 1:
            errors.append(TierValidationError(
                code=INVALID_MULTIPLIER,
                message='Earning multiplier must be at least 1',
                tier_key=candidate.tier_key,
            ))

        for other in others or []:
            if other.tier_key == candidate.tier_key:
                continue
            if not other.is_active and not include_inactive:
                continue
            if ranges_overlap(candidate, other):
                errors.append(TierValidationError(
                    code=RANGE_OVERLAP,
                    message=f'Range overlaps with {other.display_name} ({other.range_label()})',
                    tier_key=candidate.tier_key,
                    conflicting_tier_key=other.tier_key,
                ))

        if errors:
            logger.debug("Tier %s failed validation: %s",
                         candidate.tier_key, [error.code for error in errors])
        return errors

    def validate_ladder(self, tiers: Sequence[StatusTier]) -> List[TierValidationError]:
        """Ladder-wide problems across all active tiers"""
        ladder = active_ladder(tiers)
        warnings = []
        if not ladder:
            return warnings

        if to_decimal(ladder[0].min_committed) != 0:
            warnings.append(TierValidationError(
                code=LADDER_FLOOR,
                message=f'{ladder[0].display_name} should start at 0 NCTR '
                        f'(starts at {format_amount(ladder[0].min_committed)})',
                tier_key=ladder[0].tier_key,
            ))

        unbounded = [tier for tier in ladder if tier.is_unbounded]
        if len(unbounded) != 1:
            warnings.append(TierValidationError(
                code=UNBOUNDED_COUNT,
                message=f'Exactly one tier must have no maximum (found {len(unbounded)})',
            ))

        for index, tier in enumerate(ladder):
            for other in ladder[index + 1:]:
                if ranges_overlap(tier, other):
                    warnings.append(TierValidationError(
                        code=RANGE_OVERLAP,
                        message=f'NCTR threshold overlap: {tier.display_name} '
                                f'({tier.range_label()}) overlaps with '
                                f'{other.display_name} ({other.range_label()})',
                        tier_key=tier.tier_key,
                        conflicting_tier_key=other.tier_key,
                    ))

        for previous, current in zip(ladder, ladder[1:]):
            if to_decimal(current.earning_multiplier) < to_decimal(previous.earning_multiplier):
                warnings.append(TierValidationError(
                    code=MULTIPLIER_REGRESSION,
                    message=f'{current.display_name} has lower multiplier '
                            f'({current.earning_multiplier}x) than {previous.display_name} '
                            f'({previous.earning_multiplier}x)',
                    tier_key=current.tier_key,
                    conflicting_tier_key=previous.tier_key,
                ))
            if previous.max_committed is not None and \
                    to_decimal(previous.max_committed) < to_decimal(current.min_committed):
                warnings.append(TierValidationError(
                    code=RANGE_GAP,
                    message=f'Gap between {previous.display_name} (ends at '
                            f'{format_amount(previous.max_committed)}) and '
                            f'{current.display_name} (starts at '
                            f'{format_amount(current.min_committed)})',
                    tier_key=current.tier_key,
                    conflicting_tier_key=previous.tier_key,
                ))

        return warnings
