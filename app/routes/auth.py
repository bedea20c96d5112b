import os
import logging
from urllib.parse import urlencode
from fastapi import APIRouter, Request, Depends, Form
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.auth import (
    authenticate_user,
    set_session_cookie,
    clear_session_cookie,
    get_session_user,
)
from app.template_config import templates
from app.utils.safe_redirect import get_safe_redirect_url, is_valid_redirect_url

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

DEFAULT_REDIRECT_URL = os.getenv("DEFAULT_REDIRECT_URL", "/dash")


def resolve_redirect(redirect: str) -> str:
    """Safe post-login target, logging targets that get replaced."""
    if redirect and not is_valid_redirect_url(redirect):
        logger.warning("Rejected unsafe redirect target %r", redirect)
    return get_safe_redirect_url(redirect, DEFAULT_REDIRECT_URL)


@router.get("/login", response_class=HTMLResponse)
async def login_page(
    request: Request,
    redirect: str = None,
    error: str = None,
):
    """Display login page."""
    # Already logged in
    if get_session_user(request):
        return RedirectResponse(url=resolve_redirect(redirect), status_code=303)

    return templates.TemplateResponse(request, "auth/login.html", {
        "redirect": redirect if is_valid_redirect_url(redirect) else "",
        "error": error,
    })


@router.post("/login")
async def login(
    request: Request,
    email: str = Form(...),
    password: str = Form(...),
    redirect: str = Form(None),
    db: Session = Depends(get_db)
):
    """Process login form."""
    user = authenticate_user(db, email, password)

    if not user:
        logger.info("Failed login for %s", email)
        query = {"error": "Invalid email or password"}
        if is_valid_redirect_url(redirect):
            query["redirect"] = redirect
        return RedirectResponse(url="/login?" + urlencode(query), status_code=303)

    logger.info("User %s logged in", user.id)
    response = RedirectResponse(url=resolve_redirect(redirect), status_code=303)
    set_session_cookie(response, user)
    return response


@router.get("/logout")
async def logout(request: Request):
    """Log out the current user."""
    response = RedirectResponse(url="/login", status_code=303)
    clear_session_cookie(response)
    return response
