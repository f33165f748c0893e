"""
Notification service for level-up events.
"""
import logging

logger = logging.getLogger(__name__)


class TierNotificationService:
    """Service for handling tier level-up notifications"""

    @staticmethod
    def send_level_up_notification(user, old_tier, new_tier):
        """Send level-up notification"""
        notification_data = {
            'user_id': user.id,
            'old_tier': old_tier.display_name if old_tier else None,
            'new_tier': new_tier.display_name,
            'earning_multiplier': float(new_tier.earning_multiplier),
            'message': f'Congratulations! You have reached {new_tier.display_name} status!'
        }

        logger.info("Tier level-up notification: %s", notification_data)

        return notification_data
