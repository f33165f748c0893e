from django.core.management.base import BaseCommand, CommandError

from apps.commitment.engine import TierConfigValidator
from apps.commitment.models import StatusTier


class Command(BaseCommand):
    help = 'Set up the default Bronze to Diamond status tier ladder'

    TIERS = [
        {
            'tier_key': 'bronze',
            'display_name': 'Bronze',
            'badge_glyph': '🥉',
            'badge_color': '#CD7F32',
            'min_committed': 0,
            'max_committed': 1000,
            'earning_multiplier': 1.0,
            'sort_order': 1,
        },
        {
            'tier_key': 'silver',
            'display_name': 'Silver',
            'badge_glyph': '🥈',
            'badge_color': '#C0C0C0',
            'min_committed': 1000,
            'max_committed': 5000,
            'earning_multiplier': 1.5,
            'sort_order': 2,
        },
        {
            'tier_key': 'gold',
            'display_name': 'Gold',
            'badge_glyph': '🥇',
            'badge_color': '#FFD700',
            'min_committed': 5000,
            'max_committed': 15000,
            'earning_multiplier': 2.0,
            'sort_order': 3,
        },
        {
            'tier_key': 'platinum',
            'display_name': 'Platinum',
            'badge_glyph': '💠',
            'badge_color': '#E5E4E2',
            'min_committed': 15000,
            'max_committed': 50000,
            'earning_multiplier': 2.5,
            'sort_order': 4,
        },
        {
            'tier_key': 'diamond',
            'display_name': 'Diamond',
            'badge_glyph': '💎',
            'badge_color': '#B9F2FF',
            'min_committed': 50000,
            'max_committed': None,
            'earning_multiplier': 3.0,
            'sort_order': 5,
        },
    ]

    def handle(self, *args, **options):
        """Create or update status tiers"""
        ladder = [StatusTier(**tier_data).to_engine() for tier_data in self.TIERS]
        problems = TierConfigValidator().validate_ladder(ladder)
        if problems:
            raise CommandError('; '.join(problem.message for problem in problems))

        created_count = 0
        updated_count = 0

        for tier_data in self.TIERS:
            tier, created = StatusTier.objects.get_or_create(
                tier_key=tier_data['tier_key'],
                defaults=tier_data
            )

            if created:
                created_count += 1
                self.stdout.write(
                    self.style.SUCCESS(f'Created tier: {tier.display_name}')
                )
            else:
                for key, value in tier_data.items():
                    if key != 'tier_key':
                        setattr(tier, key, value)
                tier.save()
                updated_count += 1
                self.stdout.write(
                    self.style.WARNING(f'Updated tier: {tier.display_name}')
                )

        self.stdout.write(
            self.style.SUCCESS(
                f'Successfully set up status tiers: {created_count} created, {updated_count} updated'
            )
        )
