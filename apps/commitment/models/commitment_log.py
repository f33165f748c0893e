from django.conf import settings
from django.db import models


class CommitmentLog(models.Model):
    """History of confirmed commitments and the tier changes they caused"""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='commitment_logs')
    task = models.ForeignKey('EarningTask', on_delete=models.SET_NULL, null=True, blank=True)
    base_amount = models.DecimalField(max_digits=14, decimal_places=2)
    final_amount = models.PositiveIntegerField()
    lock_days = models.PositiveIntegerField()
    lock_multiplier = models.DecimalField(max_digits=5, decimal_places=2, default=1)
    merch_bonus_factor = models.DecimalField(max_digits=5, decimal_places=2, default=1)
    status_multiplier = models.DecimalField(max_digits=5, decimal_places=2, default=1)
    unlocks_at = models.DateTimeField()
    committed_before = models.DecimalField(max_digits=14, decimal_places=2)
    committed_after = models.DecimalField(max_digits=14, decimal_places=2)
    from_tier = models.ForeignKey('StatusTier', on_delete=models.SET_NULL, related_name='commitments_from', null=True)
    to_tier = models.ForeignKey('StatusTier', on_delete=models.SET_NULL, related_name='commitments_to', null=True)
    leveled_up = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'commitment_logs'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user.username}: {self.final_amount} NCTR for {self.lock_days} days"
