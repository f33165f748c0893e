from decimal import Decimal

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='StatusTier',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('tier_key', models.CharField(max_length=20, unique=True)),
                ('display_name', models.CharField(max_length=50)),
                ('badge_glyph', models.CharField(blank=True, max_length=16)),
                ('badge_color', models.CharField(blank=True, max_length=16)),
                ('min_committed', models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                ('max_committed', models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True)),
                ('earning_multiplier', models.DecimalField(decimal_places=2, default=Decimal('1.0'), max_digits=5)),
                ('sort_order', models.PositiveIntegerField(default=0)),
                ('is_active', models.BooleanField(default=True)),
                ('benefits', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'status_tiers',
                'ordering': ['min_committed', 'sort_order'],
            },
        ),
        migrations.CreateModel(
            name='EarningTask',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200)),
                ('category', models.CharField(choices=[('shopping', 'Shopping'), ('referral', 'Referral'), ('social', 'Social'), ('engagement', 'Engagement'), ('merch', 'Merch'), ('merch_tier1', 'Merch Tier 1'), ('merch_tier2', 'Merch Tier 2'), ('merch_tier3', 'Merch Tier 3')], default='shopping', max_length=20)),
                ('nctr_reward', models.PositiveIntegerField(default=0)),
                ('requires_long_lock', models.BooleanField(default=True)),
                ('lock_multiplier', models.DecimalField(decimal_places=2, default=Decimal('3.0'), max_digits=5)),
                ('multiplier_type', models.CharField(choices=[('none', 'None'), ('status_based', 'Status Based'), ('flat_bonus', 'Flat Bonus')], default='none', max_length=20)),
                ('multiplier_value', models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True)),
                ('multiplier_status_tiers', models.JSONField(blank=True, null=True)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'earning_tasks',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='MemberCommitment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('cumulative_committed', models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='commitment', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'member_commitments',
            },
        ),
        migrations.CreateModel(
            name='CommitmentLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('base_amount', models.DecimalField(decimal_places=2, max_digits=14)),
                ('final_amount', models.PositiveIntegerField()),
                ('lock_days', models.PositiveIntegerField()),
                ('lock_multiplier', models.DecimalField(decimal_places=2, default=1, max_digits=5)),
                ('merch_bonus_factor', models.DecimalField(decimal_places=2, default=1, max_digits=5)),
                ('status_multiplier', models.DecimalField(decimal_places=2, default=1, max_digits=5)),
                ('unlocks_at', models.DateTimeField()),
                ('committed_before', models.DecimalField(decimal_places=2, max_digits=14)),
                ('committed_after', models.DecimalField(decimal_places=2, max_digits=14)),
                ('leveled_up', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('from_tier', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='commitments_from', to='commitment.statustier')),
                ('task', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to='commitment.earningtask')),
                ('to_tier', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='commitments_to', to='commitment.statustier')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='commitment_logs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'commitment_logs',
                'ordering': ['-created_at'],
            },
        ),
    ]
