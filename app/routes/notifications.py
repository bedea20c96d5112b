import logging
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from app.auth import SessionUser, require_session_user
from app.services.notifications import use_notifications

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


class NotificationCreate(BaseModel):
    message: str
    level: str = "info"


def _inbox(center) -> dict:
    return {
        "notifications": [n.to_dict() for n in center.notifications],
        "unread_count": center.unread_count,
    }


@router.get("")
async def list_notifications(user: SessionUser = Depends(require_session_user)):
    """List the session user's notifications, newest first."""
    return _inbox(use_notifications(user.user_id))


@router.post("", status_code=201)
async def create_notification(
    payload: NotificationCreate,
    user: SessionUser = Depends(require_session_user),
):
    """Add a notification to the session user's inbox."""
    try:
        notification = use_notifications(user.user_id).push(payload.message, payload.level)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return notification.to_dict()


@router.post("/read-all")
async def mark_all_read(user: SessionUser = Depends(require_session_user)):
    """Mark every notification as read."""
    center = use_notifications(user.user_id)
    center.mark_as_read()
    return _inbox(center)


@router.post("/clear")
async def clear_notifications(user: SessionUser = Depends(require_session_user)):
    """Remove all notifications."""
    center = use_notifications(user.user_id)
    center.clear_all()
    logger.info("Cleared notifications for user %s", user.user_id)
    return _inbox(center)


@router.post("/{notification_id}/read")
async def mark_read(
    notification_id: int,
    user: SessionUser = Depends(require_session_user),
):
    """Mark a single notification as read."""
    center = use_notifications(user.user_id)
    try:
        center.mark_as_read(notification_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Notification not found")
    return _inbox(center)
