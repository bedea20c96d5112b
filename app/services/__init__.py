from app.services.grants import Grants, use_grants
from app.services.notifications import (
    Notification,
    NotificationCenter,
    use_notifications,
)

__all__ = [
    'Grants',
    'use_grants',
    'Notification',
    'NotificationCenter',
    'use_notifications',
]
