"""
Tier administration: validate threshold edits before they are saved.
"""
import logging

from django.db import transaction

from ..engine import TierConfigValidator
from ..models import StatusTier

logger = logging.getLogger(__name__)


class TierAdminService:
    """Service class for tier configuration"""

    @staticmethod
    def validate_tier(candidate, include_inactive=False):
        """
        Validate a candidate tier value against every stored tier.

        Args:
            candidate: engine StatusTier built from the admin's edit
            include_inactive: also check ranges of inactive tiers

        Returns:
            list: TierValidationError items, empty when valid
        """
        others = StatusTier.get_all_as_engine()
        return TierConfigValidator().validate(candidate, others, include_inactive=include_inactive)

    @staticmethod
    def update_tier(tier, data):
        """
        Apply validated field changes to a stored tier.

        Returns:
            tuple: (tier, errors); the tier is only saved when errors is empty
        """
        for key, value in data.items():
            if key != 'tier_key':
                setattr(tier, key, value)

        errors = TierAdminService.validate_tier(tier.to_engine())
        if errors:
            logger.warning("Tier %s edit rejected: %s", tier.tier_key, [str(e) for e in errors])
            return tier, errors

        with transaction.atomic():
            tier.save()
        logger.info("Tier %s updated", tier.tier_key)
        return tier, []

    @staticmethod
    def ladder_warnings():
        return TierConfigValidator().validate_ladder(StatusTier.get_all_as_engine())
