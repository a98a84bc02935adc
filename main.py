from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.infrastructure import database
from app.infrastructure.notifications import build_notification_dispatcher
from app.interfaces.api.routes import register_routes

SHUTDOWN_DRAIN_SECONDS = 30.0


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepara la base de datos y el despachador de notificaciones al arrancar.

    Al cerrar se espera a que terminen los envíos en curso antes de liberar
    las conexiones.
    """

    database.initialize_database()
    dispatcher = build_notification_dispatcher(database.SessionLocal, get_settings())
    app.state.notification_dispatcher = dispatcher
    try:
        yield
    finally:
        dispatcher.shutdown(wait=True, timeout=SHUTDOWN_DRAIN_SECONDS)
        database.engine.dispose()


def create_app() -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    app = FastAPI(title="MedLog API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
