"""
Commitment services module.

All services are exported from this module to maintain backward compatibility.
"""
from .commitment_service import CommitmentService
from .notification_service import TierNotificationService
from .tier_admin_service import TierAdminService

__all__ = [
    'CommitmentService',
    'TierNotificationService',
    'TierAdminService',
]
