"""
API tests for the commitment endpoints
"""
import pytest
from decimal import Decimal
from django.urls import reverse

from apps.commitment.models import CommitmentLog, StatusTier
from tests.factories import EarningTaskFactory, set_committed

pytestmark = pytest.mark.django_db


def test_status_requires_authentication(api_client):
    response = api_client.get(reverse('commitment:commitment-status'))
    assert response.status_code == 401
    assert response.data['msg'] == 'Authentication required'


def test_tier_ladder(api_client, member, status_tiers):
    api_client.force_authenticate(user=member)
    response = api_client.get(reverse('commitment:tier-ladder'))
    assert response.status_code == 200
    assert [tier['tier_key'] for tier in response.data['data']] == ['bronze', 'silver', 'gold']
    assert response.data['data'][2]['max_committed'] is None


def test_status(api_client, member, status_tiers):
    set_committed(member, 450)
    api_client.force_authenticate(user=member)
    response = api_client.get(reverse('commitment:commitment-status'))
    data = response.data['data']
    assert response.status_code == 200
    assert data['current']['tier_key'] == 'silver'
    assert data['next']['tier_key'] == 'gold'
    assert data['progress_percent'] == 88
    assert Decimal(data['remaining_to_next']) == Decimal('50')


def test_preview(api_client, member, status_tiers, long_lock_task):
    set_committed(member, 450)
    api_client.force_authenticate(user=member)
    response = api_client.get(reverse('commitment:task-preview', args=[long_lock_task.id]))
    assert response.status_code == 200
    options = response.data['data']['options']
    assert options['short']['final_amount'] == 150
    assert options['short']['eligible'] is False
    assert options['long']['final_amount'] == 450
    assert options['long']['duration_days'] == 360
    assert response.data['data']['task']['id'] == long_lock_task.id
    assert options['long']['description'] == '100 × 3x lock × 1.5x Silver = 450 NCTR'


def test_preview_missing_task(api_client, member, status_tiers):
    api_client.force_authenticate(user=member)
    response = api_client.get(reverse('commitment:task-preview', args=[9999]))
    assert response.status_code == 404
    assert response.data['msg'] == 'Task not found'


def test_commit_levels_up(api_client, member, status_tiers, long_lock_task):
    set_committed(member, 450)
    api_client.force_authenticate(user=member)
    response = api_client.post(
        reverse('commitment:task-commit', args=[long_lock_task.id]),
        {'lock_days': 360}, format='json'
    )
    assert response.status_code == 201
    data = response.data['data']
    assert response.data['msg'] == 'Commitment confirmed'
    assert data['reward']['final_amount'] == 450
    assert data['level_up']['leveled_up'] is True
    assert data['level_up']['from_tier']['tier_key'] == 'silver'
    assert data['level_up']['to_tier']['tier_key'] == 'gold'
    assert Decimal(data['cumulative_committed']) == Decimal('900')
    assert CommitmentLog.objects.filter(user=member).count() == 1


def test_commit_rejects_unknown_lock(api_client, member, status_tiers, long_lock_task):
    api_client.force_authenticate(user=member)
    response = api_client.post(
        reverse('commitment:task-commit', args=[long_lock_task.id]),
        {'lock_days': 45}, format='json'
    )
    assert response.status_code == 400
    assert 'lock_days' in response.data['errors']


def test_commit_rejects_short_lock_on_long_only_task(api_client, member, status_tiers, long_lock_task):
    api_client.force_authenticate(user=member)
    response = api_client.post(
        reverse('commitment:task-commit', args=[long_lock_task.id]),
        {'lock_days': 90}, format='json'
    )
    assert response.status_code == 400
    assert 'requires a 360 day lock' in response.data['msg']
    assert not CommitmentLog.objects.exists()


def test_history(api_client, member, status_tiers):
    task = EarningTaskFactory(nctr_reward=10, title='Daily check-in')
    api_client.force_authenticate(user=member)
    api_client.post(reverse('commitment:task-commit', args=[task.id]), {'lock_days': 360}, format='json')
    response = api_client.get(reverse('commitment:commitment-history'))
    assert response.status_code == 200
    assert len(response.data['data']) == 1
    entry = response.data['data'][0]
    assert entry['task_title'] == 'Daily check-in'
    assert entry['final_amount'] == 30
    assert entry['from_tier_key'] == 'bronze'


def test_admin_endpoints_require_staff(api_client, member, status_tiers):
    api_client.force_authenticate(user=member)
    response = api_client.get(reverse('commitment:tier-warnings'))
    assert response.status_code == 403
    assert response.data['msg'] == 'Permission denied'


def test_validate_reports_overlap(api_client, admin_user, status_tiers):
    api_client.force_authenticate(user=admin_user)
    response = api_client.post(reverse('commitment:tier-validate'), {
        'tier_key': 'platinum',
        'display_name': 'Platinum',
        'min_committed': '400',
        'max_committed': '500',
        'earning_multiplier': '2.5',
    }, format='json')
    assert response.status_code == 200
    data = response.data['data']
    assert data['is_valid'] is False
    assert len(data['errors']) == 1
    assert data['errors'][0]['conflicting_tier_key'] == 'silver'
    assert 'Silver' in data['errors'][0]['message']


def test_validate_accepts_touching_range(api_client, admin_user, status_tiers):
    StatusTier.objects.filter(tier_key='gold').delete()
    api_client.force_authenticate(user=admin_user)
    response = api_client.post(reverse('commitment:tier-validate'), {
        'tier_key': 'gold',
        'display_name': 'Gold',
        'min_committed': '500',
        'max_committed': None,
        'earning_multiplier': '2.0',
    }, format='json')
    assert response.data['data'] == {'is_valid': True, 'errors': []}


def test_validate_rejects_low_multiplier(api_client, admin_user, status_tiers):
    api_client.force_authenticate(user=admin_user)
    response = api_client.post(reverse('commitment:tier-validate'), {
        'display_name': 'Tin',
        'min_committed': '0',
        'earning_multiplier': '0.5',
    }, format='json')
    assert response.status_code == 400
    assert 'earning_multiplier' in response.data['errors']


def test_update_rejects_overlap(api_client, admin_user, status_tiers):
    api_client.force_authenticate(user=admin_user)
    response = api_client.put(reverse('commitment:tier-update', args=['silver']), {
        'display_name': 'Silver',
        'min_committed': '100',
        'max_committed': '800',
        'earning_multiplier': '1.5',
        'sort_order': 2,
    }, format='json')
    assert response.status_code == 400
    assert response.data['errors'] == ['Range overlaps with Gold (500 - ∞)']
    status_tiers['silver'].refresh_from_db()
    assert status_tiers['silver'].max_committed == Decimal('500')


def test_update_saves_valid_edit(api_client, admin_user, status_tiers):
    api_client.force_authenticate(user=admin_user)
    response = api_client.put(reverse('commitment:tier-update', args=['gold']), {
        'display_name': 'Gold',
        'min_committed': '500',
        'max_committed': None,
        'earning_multiplier': '2.2',
        'sort_order': 3,
    }, format='json')
    assert response.status_code == 200
    assert response.data['msg'] == 'Tier updated'
    status_tiers['gold'].refresh_from_db()
    assert status_tiers['gold'].earning_multiplier == Decimal('2.2')


def test_update_missing_tier(api_client, admin_user, status_tiers):
    api_client.force_authenticate(user=admin_user)
    response = api_client.put(reverse('commitment:tier-update', args=['mythic']), {
        'display_name': 'Mythic',
        'min_committed': '0',
        'earning_multiplier': '1',
    }, format='json')
    assert response.status_code == 404


def test_warnings(api_client, admin_user, status_tiers):
    StatusTier.objects.filter(tier_key='gold').update(min_committed=Decimal('800'))
    api_client.force_authenticate(user=admin_user)
    response = api_client.get(reverse('commitment:tier-warnings'))
    assert response.status_code == 200
    assert [warning['code'] for warning in response.data['data']] == ['range_gap']


def test_update_keeps_fields_left_out(api_client, admin_user, status_tiers):
    api_client.force_authenticate(user=admin_user)
    response = api_client.put(reverse('commitment:tier-update', args=['silver']), {
        'display_name': 'Silver',
        'min_committed': '100',
        'earning_multiplier': '1.6',
    }, format='json')
    assert response.status_code == 200
    silver = StatusTier.objects.get(tier_key='silver')
    assert silver.sort_order == 2
    assert silver.max_committed == Decimal('500')
    assert silver.is_active is True
    assert silver.earning_multiplier == Decimal('1.6')


def test_update_keeps_inactive_tier_inactive(api_client, admin_user, status_tiers):
    StatusTier.objects.filter(tier_key='gold').update(is_active=False)
    api_client.force_authenticate(user=admin_user)
    response = api_client.put(reverse('commitment:tier-update', args=['gold']), {
        'earning_multiplier': '2.2',
    }, format='json')
    assert response.status_code == 200
    gold = StatusTier.objects.get(tier_key='gold')
    assert gold.is_active is False
    assert gold.sort_order == 3
    assert gold.max_committed is None


def test_level_up_survives_multiplier_edit(api_client, admin_user, member, status_tiers, long_lock_task):
    api_client.force_authenticate(user=admin_user)
    api_client.put(reverse('commitment:tier-update', args=['gold']), {
        'display_name': 'Gold',
        'min_committed': '500',
        'earning_multiplier': '2.2',
    }, format='json')

    set_committed(member, 450)
    api_client.force_authenticate(user=member)
    response = api_client.post(
        reverse('commitment:task-commit', args=[long_lock_task.id]),
        {'lock_days': 360}, format='json'
    )
    assert response.status_code == 201
    assert response.data['data']['level_up']['leveled_up'] is True
    assert response.data['data']['level_up']['to_tier']['tier_key'] == 'gold'
