"""
Signals for commitment app
"""
import logging

from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import MemberCommitment

logger = logging.getLogger(__name__)


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_member_commitment(sender, instance, created, **kwargs):
    """Create the commitment record when a new user is created"""
    if created:
        MemberCommitment.get_or_create_for_user(instance)
        logger.debug("Created commitment record for user %s", instance.id)
