import os
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse
from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

from app.routes import (
    auth_router,
    dashboard_router,
    grants_router,
    notifications_router,
)
from app.auth import LoginRequired
from app.database import init_db, DATABASE_URL
from app.template_config import templates

# Create FastAPI app
app = FastAPI(
    title="Integram Access",
    description="Login, object grants and notifications for Integram",
    version="1.0.0"
)

# Include routers
app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(grants_router)
app.include_router(notifications_router)


def _is_api(request: Request) -> bool:
    return request.url.path.startswith("/api/")


@app.on_event("startup")
def on_startup():
    """Ensure DB is reachable and initialized at startup.

    If initialization fails the app will raise and stop with a clear error
    message.
    """
    try:
        init_db()
    except Exception as e:
        raise RuntimeError(
            f"Database initialization failed for DATABASE_URL={DATABASE_URL}: {e}"
        ) from e


@app.get("/")
async def index():
    return RedirectResponse(url="/dash", status_code=303)


@app.exception_handler(LoginRequired)
async def login_required_handler(request: Request, exc: LoginRequired):
    """Send anonymous browsers to the login page, API clients get a 401."""
    if _is_api(request):
        return JSONResponse({"detail": "Not authenticated"}, status_code=401)
    return RedirectResponse(url=exc.login_url, status_code=303)


# Error handlers
@app.exception_handler(404)
async def not_found_handler(request: Request, exc):
    """Handle 404 errors."""
    if _is_api(request):
        return JSONResponse({"detail": getattr(exc, "detail", "Not Found")}, status_code=404)
    return templates.TemplateResponse(request, "errors/404.html", {}, status_code=404)


@app.exception_handler(403)
async def forbidden_handler(request: Request, exc):
    """Handle 403 errors."""
    if _is_api(request):
        return JSONResponse({"detail": getattr(exc, "detail", "Forbidden")}, status_code=403)
    return templates.TemplateResponse(request, "errors/403.html", {}, status_code=403)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
