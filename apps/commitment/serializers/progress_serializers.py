"""
Member progress and reward breakdown serializers.
"""
from rest_framework import serializers

from .tier_serializers import TierValueSerializer


class TierProgressSerializer(serializers.Serializer):
    """
    Serializer for a member's position on the ladder.
    Used for: GET /api/commitment/status/
    """
    cumulative_committed = serializers.DecimalField(max_digits=14, decimal_places=2)
    current = TierValueSerializer(allow_null=True)
    next = TierValueSerializer(allow_null=True)
    progress_fraction = serializers.DecimalField(max_digits=6, decimal_places=4)
    progress_percent = serializers.IntegerField()
    remaining_to_next = serializers.DecimalField(max_digits=14, decimal_places=2)


class RewardBreakdownSerializer(serializers.Serializer):
    """Serializer for one commitment option's reward"""
    base_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    merch_bonus_factor = serializers.DecimalField(max_digits=5, decimal_places=2)
    lock_multiplier = serializers.DecimalField(max_digits=5, decimal_places=2)
    duration_factor = serializers.DecimalField(max_digits=5, decimal_places=2)
    status_multiplier = serializers.DecimalField(max_digits=5, decimal_places=2)
    final_amount = serializers.IntegerField()
    is_long_commitment = serializers.BooleanField()
    is_merch_category = serializers.BooleanField()
    duration_days = serializers.IntegerField(allow_null=True)
    eligible = serializers.BooleanField()
    tier_name = serializers.CharField()
    description = serializers.CharField(source='describe', read_only=True)


class LevelUpSerializer(serializers.Serializer):
    """Serializer for level-up detection results"""
    leveled_up = serializers.BooleanField()
    from_tier = TierValueSerializer(allow_null=True)
    to_tier = TierValueSerializer(allow_null=True)
