"""
Reward calculator for commitment (lock) choices.

The final amount is ``round(base * duration factor * status multiplier)``.
On a long lock the duration factor is the task's lock multiplier; for merch
tasks that same factor is reported as the merch bonus instead, so a merch
task never receives two duration-linked bonuses.
"""
import logging
from dataclasses import replace
from decimal import Decimal
from typing import Dict, Optional

from .multipliers import MultiplierResolver
from .types import (
    DEFAULT_LOCK_MULTIPLIER, CommitmentChoice, NoMultiplier, RewardBreakdown,
    round_half_up, to_decimal
)

logger = logging.getLogger(__name__)

ONE = Decimal('1')
ZERO = Decimal('0')


class RewardCalculator:
    """Compose base amount, lock and status bonuses into a final reward"""

    def __init__(self, multiplier_resolver: Optional[MultiplierResolver] = None):
        self.multiplier_resolver = multiplier_resolver or MultiplierResolver()

    def calculate(self, base_amount, status_multiplier=ONE, tier_key='',
                  is_merch_category=False, is_long_commitment=False,
                  duration_multiplier=DEFAULT_LOCK_MULTIPLIER,
                  duration_days=None, tier_name='') -> RewardBreakdown:
        """
        Calculate the reward for one commitment option.

        ``tier_name`` (or the capitalized ``tier_key``) labels the status
        factor in ``describe()``; the status multiplier passed in is
        already resolved for that tier.
        """
        base = to_decimal(base_amount)
        if base < ZERO:
            logger.warning("Negative base amount %s clamped to 0", base_amount)
            base = ZERO
        status = to_decimal(status_multiplier, ONE)

        merch_bonus = ONE
        lock_multiplier = ONE
        if is_long_commitment:
            factor = to_decimal(duration_multiplier, DEFAULT_LOCK_MULTIPLIER)
            if is_merch_category:
                merch_bonus = factor
            else:
                lock_multiplier = factor

        final_amount = round_half_up(base * merch_bonus * lock_multiplier * status)

        return RewardBreakdown(
            base_amount=base,
            merch_bonus_factor=merch_bonus,
            lock_multiplier=lock_multiplier,
            status_multiplier=status,
            final_amount=final_amount,
            is_long_commitment=bool(is_long_commitment),
            is_merch_category=bool(is_merch_category),
            duration_days=duration_days,
            tier_name=tier_name or str(tier_key or '').capitalize(),
        )

    def status_multiplier_for(self, rule, tier) -> Decimal:
        """Task curve when the task defines one, else the tier's own multiplier"""
        config = rule.multiplier_config
        if config is None or isinstance(config, NoMultiplier):
            if tier is None:
                return ONE
            return to_decimal(tier.earning_multiplier, ONE)
        return self.multiplier_resolver.resolve(config, tier.tier_key if tier else '')

    def calculate_for_task(self, rule, tier, choice: CommitmentChoice, is_long=None) -> RewardBreakdown:
        """Calculate a task reward for a member at ``tier`` picking ``choice``"""
        if is_long is None:
            is_long = choice.is_long
        breakdown = self.calculate(
            rule.base_amount,
            status_multiplier=self.status_multiplier_for(rule, tier),
            tier_key=tier.tier_key if tier else '',
            is_merch_category=rule.is_merch_category,
            is_long_commitment=is_long,
            duration_multiplier=choice.duration_multiplier if is_long else rule.lock_multiplier,
            duration_days=choice.duration_days,
            tier_name=tier.display_name if tier else '',
        )
        if rule.requires_long_lock and not is_long:
            return replace(breakdown, eligible=False)
        return breakdown

    def preview_options(self, rule, tier, short_days=None, long_days=None) -> Dict[str, RewardBreakdown]:
        """Short and long lock breakdowns side by side"""
        short_choice = CommitmentChoice.short() if short_days is None else CommitmentChoice.short(short_days)
        long_choice = (CommitmentChoice.long(rule.lock_multiplier) if long_days is None
                       else CommitmentChoice.long(rule.lock_multiplier, days=long_days))
        return {
            'short': self.calculate_for_task(rule, tier, short_choice, is_long=False),
            'long': self.calculate_for_task(rule, tier, long_choice, is_long=True),
        }
