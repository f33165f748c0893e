from django import forms
from django.contrib import admin

from .engine import TierConfigValidator
from .models import CommitmentLog, EarningTask, MemberCommitment, StatusTier


class StatusTierAdminForm(forms.ModelForm):
    """Run the tier validator before an admin save"""

    class Meta:
        model = StatusTier
        fields = '__all__'

    def clean(self):
        cleaned_data = super().clean()
        if self.errors:
            return cleaned_data

        candidate = StatusTier(**{
            field: cleaned_data.get(field)
            for field in ('tier_key', 'display_name', 'min_committed', 'max_committed',
                          'earning_multiplier', 'sort_order', 'is_active')
        })
        others = [tier.to_engine() for tier in StatusTier.objects.exclude(pk=self.instance.pk)]
        errors = TierConfigValidator().validate(candidate.to_engine(), others)
        if errors:
            raise forms.ValidationError([error.message for error in errors])
        return cleaned_data


@admin.register(StatusTier)
class StatusTierAdmin(admin.ModelAdmin):
    """Admin interface for status tiers"""
    form = StatusTierAdminForm

    list_display = [
        'display_name', 'tier_key', 'min_committed', 'max_committed',
        'earning_multiplier', 'sort_order', 'is_active'
    ]
    list_filter = ['is_active']
    search_fields = ['tier_key', 'display_name']
    ordering = ['min_committed']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('tier_key', 'display_name', 'badge_glyph', 'badge_color', 'sort_order', 'is_active')
        }),
        ('Committed NCTR Thresholds', {
            'fields': ('min_committed', 'max_committed')
        }),
        ('Benefits', {
            'fields': ('earning_multiplier', 'benefits')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(EarningTask)
class EarningTaskAdmin(admin.ModelAdmin):
    """Admin interface for earning tasks"""
    list_display = [
        'title', 'category', 'nctr_reward', 'requires_long_lock',
        'lock_multiplier', 'multiplier_type', 'is_active'
    ]
    list_filter = ['category', 'multiplier_type', 'is_active']
    search_fields = ['title']


@admin.register(MemberCommitment)
class MemberCommitmentAdmin(admin.ModelAdmin):
    """Admin interface for member commitment totals"""
    list_display = ['user', 'cumulative_committed', 'current_tier', 'updated_at']
    search_fields = ['user__username', 'user__email']
    ordering = ['-cumulative_committed']
    readonly_fields = ['cumulative_committed', 'created_at', 'updated_at']

    def current_tier(self, obj):
        return obj.current_tier_key or '-'
    current_tier.short_description = 'Current Tier'


@admin.register(CommitmentLog)
class CommitmentLogAdmin(admin.ModelAdmin):
    """Admin interface for commitment history"""
    list_display = [
        'user', 'task', 'final_amount', 'lock_days', 'from_tier',
        'to_tier', 'leveled_up', 'created_at'
    ]
    list_filter = ['leveled_up', 'lock_days', 'created_at']
    search_fields = ['user__username', 'task__title']
    ordering = ['-created_at']
    readonly_fields = ['created_at']
