import os
import logging
from datetime import datetime
from typing import NamedTuple, Optional
from urllib.parse import urlencode
from passlib.context import CryptContext
from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired
from fastapi import Request
from sqlalchemy.orm import Session

from app.database import DATABASE_URL
from app.models.user import User

logger = logging.getLogger(__name__)

# Password hashing
if DATABASE_URL.startswith("sqlite"):
    # pbkdf2_sha256 is widely available and avoids compiled bcrypt issues in dev
    pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
else:
    pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Session serializer
SECRET_KEY = os.getenv("SECRET_KEY", "your-super-secret-key-change-in-production-min-32-chars")
SESSION_EXPIRE_MINUTES = int(os.getenv("SESSION_EXPIRE_MINUTES", "480"))
SESSION_COOKIE = "session"
serializer = URLSafeTimedSerializer(SECRET_KEY)


class SessionUser(NamedTuple):
    """Identity carried by the session cookie."""
    user_id: Optional[int]
    user_role: str = ""
    user_name: str = ""


class LoginRequired(Exception):
    """Raised by route dependencies when no valid session is present."""

    def __init__(self, next_path: str = "/"):
        super().__init__(next_path)
        self.next_path = next_path

    @property
    def login_url(self) -> str:
        return "/login?" + urlencode({"redirect": self.next_path})


def hash_password(password: str) -> str:
    """Hash a password for storing."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a stored password against one provided by user."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Malformed or unknown hash
        return False


def create_session_token(user: User) -> str:
    """Create a session token for a user."""
    data = {
        "user_id": user.id,
        "user_role": user.role,
        "user_name": user.full_name,
        "created": datetime.utcnow().isoformat(),
    }
    return serializer.dumps(data)


def decode_session_token(token: str) -> Optional[dict]:
    """Decode and validate a session token."""
    try:
        return serializer.loads(token, max_age=SESSION_EXPIRE_MINUTES * 60)
    except SignatureExpired:
        logger.info("Session token expired")
        return None
    except BadSignature:
        logger.warning("Session token with bad signature rejected")
        return None


def get_session_user(request: Request) -> Optional[SessionUser]:
    """Get the session user from the session cookie, or None."""
    token = request.cookies.get(SESSION_COOKIE)
    if not token:
        return None

    data = decode_session_token(token)
    if not data or data.get("user_id") is None:
        return None

    return SessionUser(
        user_id=data["user_id"],
        user_role=data.get("user_role") or "",
        user_name=data.get("user_name") or "",
    )


async def require_session_user(request: Request) -> SessionUser:
    """Dependency returning the session user.

    Raises LoginRequired so the app can send the browser to the login page
    with the current path as the redirect target.
    """
    user = get_session_user(request)
    if user is None:
        next_path = request.url.path
        if request.url.query:
            next_path += "?" + request.url.query
        raise LoginRequired(next_path)
    return user


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """Authenticate a user by email and password."""
    user = db.query(User).filter(User.email == email).first()
    if not user:
        return None
    if not user.is_active:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def set_session_cookie(response, user: User):
    """Set session cookie on response."""
    token = create_session_token(user)
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        httponly=True,
        max_age=SESSION_EXPIRE_MINUTES * 60,
        samesite="lax"
    )
    return response


def clear_session_cookie(response):
    """Clear session cookie on response."""
    response.delete_cookie(SESSION_COOKIE)
    return response
