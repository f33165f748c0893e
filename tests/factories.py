"""
Test factories for creating test data using factory_boy.
"""
import factory
from factory.django import DjangoModelFactory
from decimal import Decimal
from django.contrib.auth import get_user_model

User = get_user_model()


class UserFactory(DjangoModelFactory):
    """Factory for creating test users."""

    class Meta:
        model = User
        django_get_or_create = ('username',)

    username = factory.Sequence(lambda n: f"member{n}")
    email = factory.LazyAttribute(lambda obj: f"{obj.username}@example.com")
    is_active = True


class StatusTierFactory(DjangoModelFactory):
    """Factory for creating status tiers."""

    class Meta:
        model = 'commitment.StatusTier'
        django_get_or_create = ('tier_key',)

    tier_key = 'bronze'
    display_name = 'Bronze'
    min_committed = Decimal('0')
    max_committed = Decimal('1000')
    earning_multiplier = Decimal('1.0')
    sort_order = 1
    is_active = True
    benefits = factory.LazyFunction(dict)


class EarningTaskFactory(DjangoModelFactory):
    """Factory for creating earning tasks."""

    class Meta:
        model = 'commitment.EarningTask'

    title = factory.Sequence(lambda n: f"Bounty {n}")
    category = 'shopping'
    nctr_reward = 100
    requires_long_lock = True
    lock_multiplier = Decimal('3.0')
    multiplier_type = 'none'
    is_active = True


class MerchTaskFactory(EarningTaskFactory):
    """Factory for merch tasks."""
    category = 'merch_tier1'
    title = factory.Sequence(lambda n: f"Merch drop {n}")


def set_committed(user, amount):
    """Put a member at a given committed total."""
    from apps.commitment.models import MemberCommitment
    membership = MemberCommitment.get_or_create_for_user(user)
    membership.cumulative_committed = Decimal(str(amount))
    membership.save()
    return membership
