from django.conf import settings
from django.db import models
from django.db import transaction
from django.db.models import F
from django.utils import timezone
from decimal import Decimal

from ..engine import MemberCommitmentState, TierResolver


class MemberCommitment(models.Model):
    """Member's cumulative committed NCTR; the tier is always derived from it"""
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='commitment')
    cumulative_committed = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'member_commitments'

    def __str__(self):
        return f"{self.user.username} - {self.cumulative_committed} NCTR committed"

    def to_state(self):
        return MemberCommitmentState(cumulative_committed=Decimal(self.cumulative_committed))

    def get_progress(self, tiers=None):
        """Resolve current tier, next tier and progress for this member"""
        from .tier import StatusTier
        ladder = StatusTier.get_active_ladder() if tiers is None else tiers
        return TierResolver().resolve(ladder, self.cumulative_committed)

    @property
    def current_tier_key(self):
        from .tier import StatusTier
        return self.to_state().current_tier_key(StatusTier.get_active_ladder())

    def apply_commitment(self, amount):
        """
        Add a confirmed commitment to the cumulative total.

        The row is locked and incremented with a single F() update so two
        concurrent rewards for the same member cannot lose an update.

        Returns:
            tuple: (total before, total after)
        """
        amount = Decimal(str(amount))
        if amount < 0:
            raise ValueError("Committed amount cannot be negative")

        with transaction.atomic():
            locked = type(self).objects.select_for_update().get(pk=self.pk)
            before = locked.cumulative_committed
            type(self).objects.filter(pk=self.pk).update(
                cumulative_committed=F('cumulative_committed') + amount,
                updated_at=timezone.now(),
            )
            self.refresh_from_db(fields=['cumulative_committed', 'updated_at'])

        return before, self.cumulative_committed

    @classmethod
    def get_or_create_for_user(cls, user):
        membership, created = cls.objects.get_or_create(
            user=user,
            defaults={'cumulative_committed': 0}
        )
        return membership
