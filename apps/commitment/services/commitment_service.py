"""
Commitment service: previews, confirmed locks and member progress.
"""
import logging
from decimal import Decimal

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from ..engine import CommitmentChoice, LevelUpDetector, RewardCalculator
from ..models import CommitmentLog, MemberCommitment, StatusTier
from .notification_service import TierNotificationService

logger = logging.getLogger(__name__)


class CommitmentService:
    """Service class for commitment operations"""

    @staticmethod
    def lock_options():
        return {
            'short': settings.COMMITMENT_SHORT_LOCK_DAYS,
            'long': settings.COMMITMENT_LONG_LOCK_DAYS,
        }

    @staticmethod
    def get_member_progress(user, ladder=None):
        """Current tier, next tier and progress for a member"""
        membership = MemberCommitment.get_or_create_for_user(user)
        ladder = StatusTier.get_active_ladder() if ladder is None else ladder
        return membership, membership.get_progress(ladder)

    @staticmethod
    def preview_task_rewards(user, task):
        """Short and long lock rewards for a task, side by side"""
        _, progress = CommitmentService.get_member_progress(user)
        options = CommitmentService.lock_options()
        return RewardCalculator().preview_options(
            task.to_rule(), progress.current,
            short_days=options['short'], long_days=options['long'],
        )

    @staticmethod
    def build_choice(task, lock_days):
        """Map a requested lock duration to a commitment choice"""
        options = CommitmentService.lock_options()
        if lock_days == options['long']:
            return CommitmentChoice.long(task.lock_multiplier, days=lock_days), True
        if lock_days == options['short']:
            if task.requires_long_lock:
                raise ValueError(f"{task.title} requires a {options['long']} day lock")
            return CommitmentChoice.short(days=lock_days), False
        raise ValueError(f"Unsupported lock duration: {lock_days} days")

    @staticmethod
    def commit_task_reward(user, task, lock_days):
        """
        Confirm a member's lock choice for a task.

        The reward is recomputed from the stored task, added to the member's
        cumulative total in one atomic increment, and the tier before and
        after is compared to detect a level-up.

        Returns:
            tuple: (CommitmentLog, RewardBreakdown, LevelUpResult)
        """
        if not task.is_active:
            raise ValueError(f"{task.title} is no longer active")

        try:
            choice, is_long = CommitmentService.build_choice(task, lock_days)
        except ValueError as e:
            logger.warning("Rejected commitment for user %s on task %s: %s", user.id, task.id, e)
            raise

        ladder = StatusTier.get_active_ladder()
        membership, progress = CommitmentService.get_member_progress(user, ladder)
        breakdown = RewardCalculator().calculate_for_task(
            task.to_rule(), progress.current, choice, is_long=is_long
        )

        with transaction.atomic():
            before, after = membership.apply_commitment(breakdown.final_amount)
            level_up = LevelUpDetector().detect(ladder, before, after)

            tiers_by_key = StatusTier.objects.in_bulk(
                [tier.tier_key for tier in (level_up.from_tier, level_up.to_tier) if tier],
                field_name='tier_key'
            )
            now = timezone.now()
            log = CommitmentLog.objects.create(
                user=user,
                task=task,
                base_amount=breakdown.base_amount,
                final_amount=breakdown.final_amount,
                lock_days=choice.duration_days,
                lock_multiplier=breakdown.lock_multiplier,
                merch_bonus_factor=breakdown.merch_bonus_factor,
                status_multiplier=breakdown.status_multiplier,
                unlocks_at=choice.unlock_date(now),
                committed_before=before,
                committed_after=after,
                from_tier=tiers_by_key.get(level_up.from_tier.tier_key) if level_up.from_tier else None,
                to_tier=tiers_by_key.get(level_up.to_tier.tier_key) if level_up.to_tier else None,
                leveled_up=level_up.leveled_up,
            )

        logger.info("User %s committed %s NCTR for %s days (total %s)",
                    user.id, breakdown.final_amount, choice.duration_days, after)

        if level_up.leveled_up:
            TierNotificationService.send_level_up_notification(
                user, level_up.from_tier, level_up.to_tier
            )

        return log, breakdown, level_up

    @staticmethod
    def get_commitment_history(user, limit=20):
        """Get a member's commitment history"""
        return CommitmentLog.objects.select_related('task', 'from_tier', 'to_tier') \
            .filter(user=user)[:limit]

    @staticmethod
    def committed_total(user):
        """Cumulative committed total, read from the database"""
        total = MemberCommitment.objects.filter(user=user) \
            .values_list('cumulative_committed', flat=True).first()
        return Decimal('0') if total is None else total
