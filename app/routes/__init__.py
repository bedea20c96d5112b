from app.routes.auth import router as auth_router
from app.routes.dashboard import router as dashboard_router
from app.routes.grants import router as grants_router
from app.routes.notifications import router as notifications_router

__all__ = [
    'auth_router',
    'dashboard_router',
    'grants_router',
    'notifications_router',
]
