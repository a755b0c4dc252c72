# backend/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from config import Settings, get_settings
from database import Database
from utils.errors import install_error_handlers

# Routers
from routes.auth import router as auth_router
from routes.loads import router as loads_router
from routes.fuel_stops import router as fuel_stops_router
from routes.settings import router as settings_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        # Each app built by the factory applies its own level
        force=True,
    )

    # The database is opened with the app and closed when it stops
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = Database(settings.database_url)
        db.create_all()
        app.state.db = db
        try:
            yield
        finally:
            db.dispose()

    app = FastAPI(title="Freight Tracker API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    origins = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    if settings.FRONTEND_URL and settings.FRONTEND_URL not in origins:
        origins.append(settings.FRONTEND_URL)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_error_handlers(app)

    # Register routers
    app.include_router(auth_router, prefix="/api")
    app.include_router(loads_router, prefix="/api")
    app.include_router(fuel_stops_router, prefix="/api")
    app.include_router(settings_router, prefix="/api")

    @app.get("/")
    def read_root():
        return {"message": "Freight Tracker API is running"}

    return app


app = create_app()
