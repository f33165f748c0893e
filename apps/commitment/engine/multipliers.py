"""
Resolve the multiplier a task applies for a member's status tier.
"""
import logging
from decimal import Decimal
from typing import Mapping, Optional

from .types import (
    FlatBonusMultiplier, NoMultiplier, StatusBasedMultiplier, to_decimal
)

logger = logging.getLogger(__name__)

ONE = Decimal('1')

# Used when a status based task does not list the member's tier
DEFAULT_STATUS_CURVE = {
    'bronze': Decimal('1'),
    'silver': Decimal('1.5'),
    'gold': Decimal('2'),
    'platinum': Decimal('2.5'),
    'diamond': Decimal('3'),
}


class MultiplierResolver:
    """Turn a task multiplier configuration into a number for one tier"""

    def __init__(self, default_curve: Optional[Mapping[str, Decimal]] = None):
        curve = DEFAULT_STATUS_CURVE if default_curve is None else default_curve
        self.default_curve = {
            str(key).lower(): to_decimal(value, ONE) for key, value in curve.items()
        }

    def resolve(self, config, tier_key) -> Decimal:
        """
        Get the effective multiplier for ``tier_key``.

        Args:
            config: NoMultiplier, StatusBasedMultiplier or FlatBonusMultiplier
            tier_key: Member's tier key, may be empty or unknown

        Returns:
            Decimal: Multiplier, 1 whenever data is missing
        """
        if config is None or isinstance(config, NoMultiplier):
            return ONE

        if isinstance(config, FlatBonusMultiplier):
            return to_decimal(config.value, ONE)

        if isinstance(config, StatusBasedMultiplier):
            overrides = config.overrides or {}
            if tier_key in overrides:
                return to_decimal(overrides[tier_key], ONE)
            return self.default_for(tier_key)

        logger.warning("Unknown multiplier config %r, using 1", config)
        return ONE

    def default_for(self, tier_key) -> Decimal:
        """Look a tier up in the default curve, case-insensitively"""
        key = str(tier_key or '').strip().lower()
        multiplier = self.default_curve.get(key)
        if multiplier is None:
            logger.debug("No default multiplier for tier %r, using 1", tier_key)
            return ONE
        return multiplier
