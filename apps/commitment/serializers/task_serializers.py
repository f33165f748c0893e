"""
Earning task and commitment request serializers.
"""
from rest_framework import serializers

from apps.common.validators import validate_lock_days
from ..models import CommitmentLog, EarningTask


class EarningTaskSerializer(serializers.ModelSerializer):
    """
    Serializer for earning task information.
    Used for nested serialization in previews and history.
    """
    is_merch_category = serializers.BooleanField(read_only=True)

    class Meta:
        model = EarningTask
        fields = ['id', 'title', 'category', 'nctr_reward', 'requires_long_lock',
                  'lock_multiplier', 'multiplier_type', 'multiplier_value',
                  'multiplier_status_tiers', 'is_merch_category']
        read_only_fields = fields


class CommitRequestSerializer(serializers.Serializer):
    """
    Serializer for a member confirming a lock.
    Used for: POST /api/commitment/tasks/{id}/commit/
    """
    lock_days = serializers.IntegerField(
        validators=[validate_lock_days],
        help_text="Lock duration in days (short or long lock)"
    )


class CommitmentLogListSerializer(serializers.ModelSerializer):
    """
    Serializer for commitment history list view - minimal fields for list display.
    Used for: GET /api/commitment/history/
    """
    task_title = serializers.CharField(source='task.title', read_only=True, default=None)
    from_tier_key = serializers.CharField(source='from_tier.tier_key', read_only=True, default=None)
    to_tier_key = serializers.CharField(source='to_tier.tier_key', read_only=True, default=None)

    class Meta:
        model = CommitmentLog
        fields = ['id', 'task_title', 'final_amount', 'lock_days', 'unlocks_at',
                  'committed_after', 'from_tier_key', 'to_tier_key', 'leveled_up',
                  'created_at']
        read_only_fields = fields
