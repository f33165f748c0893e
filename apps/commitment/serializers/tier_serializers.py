"""
Status tier serializers.
"""
from decimal import Decimal

from rest_framework import serializers

from apps.common.validators import validate_earning_multiplier
from ..engine import StatusTier as TierValue
from ..models import StatusTier


class StatusTierSerializer(serializers.ModelSerializer):
    """
    Serializer for status tier information.
    Used for: GET /api/commitment/tiers/ and nested tier fields.
    """
    class Meta:
        model = StatusTier
        fields = ['tier_key', 'display_name', 'badge_glyph', 'badge_color',
                  'min_committed', 'max_committed', 'earning_multiplier',
                  'sort_order', 'is_active', 'benefits']
        read_only_fields = fields


class TierValueSerializer(serializers.Serializer):
    """Serializer for engine tier values (cached ladder, progress)"""
    tier_key = serializers.CharField()
    display_name = serializers.CharField()
    badge_glyph = serializers.CharField()
    badge_color = serializers.CharField()
    min_committed = serializers.DecimalField(max_digits=14, decimal_places=2)
    max_committed = serializers.DecimalField(max_digits=14, decimal_places=2, allow_null=True)
    earning_multiplier = serializers.DecimalField(max_digits=5, decimal_places=2)
    sort_order = serializers.IntegerField()


class TierEditSerializer(serializers.Serializer):
    """
    Serializer for an admin's tier threshold edit.
    Used for: POST /api/commitment/admin/tiers/validate/
              PUT /api/commitment/admin/tiers/{tier_key}/
    """
    tier_key = serializers.CharField(max_length=20, required=False)
    display_name = serializers.CharField(max_length=50)
    badge_glyph = serializers.CharField(max_length=16, required=False, allow_blank=True, default='')
    badge_color = serializers.CharField(max_length=16, required=False, allow_blank=True, default='')
    min_committed = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=Decimal('0'))
    max_committed = serializers.DecimalField(max_digits=14, decimal_places=2, allow_null=True, required=False, default=None)
    earning_multiplier = serializers.DecimalField(
        max_digits=5, decimal_places=2, validators=[validate_earning_multiplier]
    )
    sort_order = serializers.IntegerField(min_value=0, required=False, default=0)
    is_active = serializers.BooleanField(required=False, default=True)

    def to_candidate(self, tier_key=None):
        """Build the engine value the validator checks"""
        data = self.validated_data
        return TierValue(
            tier_key=tier_key or data.get('tier_key', ''),
            display_name=data['display_name'],
            min_committed=data['min_committed'],
            max_committed=data.get('max_committed'),
            earning_multiplier=data['earning_multiplier'],
            sort_order=data.get('sort_order', 0),
            is_active=data.get('is_active', True),
            badge_glyph=data.get('badge_glyph', ''),
            badge_color=data.get('badge_color', ''),
        )


class TierValidationErrorSerializer(serializers.Serializer):
    """Serializer for validator results"""
    code = serializers.CharField()
    message = serializers.CharField()
    tier_key = serializers.CharField(allow_null=True)
    conflicting_tier_key = serializers.CharField(allow_null=True)
