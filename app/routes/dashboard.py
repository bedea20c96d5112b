from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse

from app.auth import SessionUser, require_session_user
from app.services.grants import use_grants
from app.services.notifications import use_notifications
from app.template_config import templates

router = APIRouter(tags=["dashboard"])


@router.get("/dash", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    user: SessionUser = Depends(require_session_user),
):
    """Landing page after login."""
    center = use_notifications(user.user_id)
    return templates.TemplateResponse(request, "dash.html", {
        "user": user,
        "is_admin": use_grants(user).is_admin,
        "notifications": center.notifications[:10],
        "unread_count": center.unread_count,
    })
