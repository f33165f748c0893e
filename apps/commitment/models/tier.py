from django.conf import settings
from django.core.cache import cache
from django.db import models
from decimal import Decimal

from ..engine import StatusTier as TierValue

LADDER_CACHE_KEY = 'commitment:active_tier_ladder'


class StatusTier(models.Model):
    """Status tier definitions, keyed on cumulative committed NCTR"""
    tier_key = models.CharField(max_length=20, unique=True)
    display_name = models.CharField(max_length=50)
    badge_glyph = models.CharField(max_length=16, blank=True)
    badge_color = models.CharField(max_length=16, blank=True)
    min_committed = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    max_committed = models.DecimalField(max_digits=14, decimal_places=2, null=True, blank=True)
    earning_multiplier = models.DecimalField(max_digits=5, decimal_places=2, default=Decimal('1.0'))
    sort_order = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True)
    benefits = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'status_tiers'
        ordering = ['min_committed', 'sort_order']

    def __str__(self):
        return self.display_name

    def save(self, *args, **kwargs):
        super().save(*args, **kwargs)
        cache.delete(LADDER_CACHE_KEY)

    def delete(self, *args, **kwargs):
        result = super().delete(*args, **kwargs)
        cache.delete(LADDER_CACHE_KEY)
        return result

    def to_engine(self):
        """Convert to the engine's immutable tier value"""
        return TierValue(
            tier_key=self.tier_key,
            display_name=self.display_name,
            min_committed=Decimal(self.min_committed),
            max_committed=None if self.max_committed is None else Decimal(self.max_committed),
            earning_multiplier=Decimal(self.earning_multiplier),
            sort_order=self.sort_order,
            is_active=self.is_active,
            badge_glyph=self.badge_glyph,
            badge_color=self.badge_color,
        )

    @classmethod
    def get_active_ladder(cls):
        """Active tiers as engine values, cached until a tier changes"""
        ladder = cache.get(LADDER_CACHE_KEY)
        if ladder is None:
            ladder = [tier.to_engine() for tier in cls.objects.filter(is_active=True)]
            cache.set(LADDER_CACHE_KEY, ladder, settings.TIER_LADDER_CACHE_TIMEOUT)
        return ladder

    @classmethod
    def get_all_as_engine(cls):
        return [tier.to_engine() for tier in cls.objects.all()]
