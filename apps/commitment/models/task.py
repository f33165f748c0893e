from django.db import models
from decimal import Decimal

from ..engine import (
    FlatBonusMultiplier, NoMultiplier, StatusBasedMultiplier, TaskRewardRule
)
from ..engine.types import MERCH_CATEGORIES, to_decimal


class EarningTask(models.Model):
    """Task or bounty that pays NCTR, with its lock and multiplier rules"""
    CATEGORY_CHOICES = [
        ('shopping', 'Shopping'),
        ('referral', 'Referral'),
        ('social', 'Social'),
        ('engagement', 'Engagement'),
        ('merch', 'Merch'),
        ('merch_tier1', 'Merch Tier 1'),
        ('merch_tier2', 'Merch Tier 2'),
        ('merch_tier3', 'Merch Tier 3'),
    ]
    MULTIPLIER_TYPES = [
        ('none', 'None'),
        ('status_based', 'Status Based'),
        ('flat_bonus', 'Flat Bonus'),
    ]

    title = models.CharField(max_length=200)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES, default='shopping')
    nctr_reward = models.PositiveIntegerField(default=0)
    requires_long_lock = models.BooleanField(default=True)
    lock_multiplier = models.DecimalField(max_digits=5, decimal_places=2, default=Decimal('3.0'))
    multiplier_type = models.CharField(max_length=20, choices=MULTIPLIER_TYPES, default='none')
    multiplier_value = models.DecimalField(max_digits=5, decimal_places=2, null=True, blank=True)
    multiplier_status_tiers = models.JSONField(null=True, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'earning_tasks'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} - {self.nctr_reward} NCTR"

    @property
    def is_merch_category(self):
        return self.category in MERCH_CATEGORIES

    def multiplier_config(self):
        """Build the multiplier variant for this task"""
        if self.multiplier_type == 'flat_bonus':
            value = self.multiplier_value if self.multiplier_value is not None else Decimal('2')
            return FlatBonusMultiplier(value=Decimal(value))
        if self.multiplier_type == 'status_based':
            overrides = {
                key: to_decimal(value, Decimal('1'))
                for key, value in (self.multiplier_status_tiers or {}).items()
            }
            return StatusBasedMultiplier(overrides=overrides)
        return NoMultiplier()

    def to_rule(self):
        return TaskRewardRule(
            base_amount=Decimal(self.nctr_reward),
            category=self.category,
            multiplier_config=self.multiplier_config(),
            lock_multiplier=Decimal(self.lock_multiplier),
            requires_long_lock=self.requires_long_lock,
        )
