"""In-memory notification inbox, one per user."""

import itertools
import logging
import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

LEVELS = ("info", "success", "warning", "error")


class Notification:
    """A single message shown to a user."""

    def __init__(self, notification_id: int, message: str, level: str = "info"):
        self.id = notification_id
        self.message = message
        self.level = level
        self.created_at = datetime.now(timezone.utc)
        self.read = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "message": self.message,
            "level": self.level,
            "created_at": self.created_at.isoformat(),
            "read": self.read,
        }

    def __repr__(self):
        return f"<Notification {self.id} {self.level}>"


class NotificationCenter:
    """Notifications of one user. Not persisted."""

    def __init__(self):
        self._items: List[Notification] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    @property
    def notifications(self) -> List[Notification]:
        """Newest first."""
        with self._lock:
            return list(reversed(self._items))

    @property
    def unread_count(self) -> int:
        with self._lock:
            return sum(1 for n in self._items if not n.read)

    def push(self, message: str, level: str = "info") -> Notification:
        if level not in LEVELS:
            raise ValueError(f"Unknown notification level '{level}'")
        with self._lock:
            notification = Notification(next(self._ids), message, level)
            self._items.append(notification)
        return notification

    def mark_as_read(self, notification_id: Optional[int] = None) -> None:
        """Mark one notification as read, or all of them when no id is given."""
        with self._lock:
            if notification_id is None:
                for n in self._items:
                    n.read = True
                return
            for n in self._items:
                if n.id == notification_id:
                    n.read = True
                    return
        raise KeyError(notification_id)

    def clear_all(self) -> None:
        with self._lock:
            self._items.clear()


_centers: Dict[int, NotificationCenter] = {}
_centers_lock = threading.Lock()


def use_notifications(user_id: int) -> NotificationCenter:
    """Return the notification center for a user, creating it on first use."""
    with _centers_lock:
        center = _centers.get(user_id)
        if center is None:
            center = NotificationCenter()
            _centers[user_id] = center
            logger.debug("Created notification center for user %s", user_id)
        return center


def reset_notifications():
    """Drop every user's notifications."""
    with _centers_lock:
        _centers.clear()
