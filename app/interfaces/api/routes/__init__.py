from fastapi import FastAPI

from .admin import router as admin_router
from .collaborations import router as collaborations_router
from .notifications import router as notifications_router
from .sessions import router as sessions_router
from .support import router as support_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(admin_router)
    app.include_router(collaborations_router)
    app.include_router(notifications_router)
    app.include_router(sessions_router)
    app.include_router(support_router)
    app.include_router(users_router)
