"""Centralized Jinja2 template configuration with timezone support."""
import os
from datetime import datetime, timezone
from pathlib import Path
from zoneinfo import ZoneInfo

from fastapi.templating import Jinja2Templates

# App timezone setting - defaults to UTC
APP_TIMEZONE = os.getenv("APP_TIMEZONE", "UTC")

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


def get_app_tz() -> ZoneInfo:
    """Get the application timezone."""
    return ZoneInfo(APP_TIMEZONE)


def localtime(dt: datetime, fmt: str = None) -> str:
    """Jinja filter to convert UTC datetime to local time string.

    Usage in templates:
        {{ notification.created_at | localtime }}
        {{ notification.created_at | localtime('%b %d, %H:%M') }}
    """
    if dt is None:
        return ""

    # If naive, assume UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    local_dt = dt.astimezone(get_app_tz())

    if fmt:
        return local_dt.strftime(fmt)

    # Default format: "Jan 15, 14:30"
    return local_dt.strftime("%b %d, %H:%M")


def create_templates() -> Jinja2Templates:
    """Create a Jinja2Templates instance with custom filters."""
    templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
    templates.env.filters["localtime"] = localtime
    return templates


# Singleton template instance - import this in route files
templates = create_templates()
