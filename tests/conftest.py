"""
Test configuration for the loyalty commitment server.
"""
import pytest
from decimal import Decimal
from django.core.cache import cache

from apps.commitment.engine import StatusTier


@pytest.fixture
def clear_cache():
    """The tier ladder is cached; start every test from an empty cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def ladder():
    """Bronze [0, 100), Silver [100, 500), Gold [500, unbounded)"""
    return [
        StatusTier('bronze', 'Bronze', Decimal('0'), Decimal('100'), Decimal('1'), sort_order=1),
        StatusTier('silver', 'Silver', Decimal('100'), Decimal('500'), Decimal('1.5'), sort_order=2),
        StatusTier('gold', 'Gold', Decimal('500'), None, Decimal('2'), sort_order=3),
    ]


@pytest.fixture
def five_tier_ladder():
    """Default Bronze to Diamond ladder"""
    return [
        StatusTier('bronze', 'Bronze', Decimal('0'), Decimal('1000'), Decimal('1'), sort_order=1),
        StatusTier('silver', 'Silver', Decimal('1000'), Decimal('5000'), Decimal('1.5'), sort_order=2),
        StatusTier('gold', 'Gold', Decimal('5000'), Decimal('15000'), Decimal('2'), sort_order=3),
        StatusTier('platinum', 'Platinum', Decimal('15000'), Decimal('50000'), Decimal('2.5'), sort_order=4),
        StatusTier('diamond', 'Diamond', Decimal('50000'), None, Decimal('3'), sort_order=5),
    ]


@pytest.fixture
def status_tiers(db, clear_cache):
    """Stored Bronze/Silver/Gold tiers"""
    from tests.factories import StatusTierFactory
    return {
        'bronze': StatusTierFactory(tier_key='bronze', display_name='Bronze',
                                    min_committed=Decimal('0'), max_committed=Decimal('100'),
                                    earning_multiplier=Decimal('1.0'), sort_order=1),
        'silver': StatusTierFactory(tier_key='silver', display_name='Silver',
                                    min_committed=Decimal('100'), max_committed=Decimal('500'),
                                    earning_multiplier=Decimal('1.5'), sort_order=2),
        'gold': StatusTierFactory(tier_key='gold', display_name='Gold',
                                  min_committed=Decimal('500'), max_committed=None,
                                  earning_multiplier=Decimal('2.0'), sort_order=3),
    }


@pytest.fixture
def member(db):
    """A member with nothing committed yet."""
    from tests.factories import UserFactory
    return UserFactory()


@pytest.fixture
def admin_user(db):
    from tests.factories import UserFactory
    return UserFactory(is_staff=True)


@pytest.fixture
def long_lock_task(db):
    """Shopping task paying 100 NCTR, long lock required, 3x lock multiplier"""
    from tests.factories import EarningTaskFactory
    return EarningTaskFactory(nctr_reward=100)


@pytest.fixture
def api_client():
    from rest_framework.test import APIClient
    return APIClient()
