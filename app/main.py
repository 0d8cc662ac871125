import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import appointment_options, bookings, doctors, payments, users
from app.core.config import settings, _ENV_FILE
from app.core.db import Database

if os.getenv("ENV") != "production":
    logging.basicConfig(level=logging.DEBUG)
else:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}',
    )
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.db
    logger.info("Loading .env from: %s (exists: %s)", _ENV_FILE, _ENV_FILE.exists())
    if settings.auto_create_tables:
        await database.create_all()
        logger.info("Tables created (AUTO_CREATE_TABLES is on)")
    if settings.payments_enabled:
        logger.info("Stripe: configured (STRIPE_SECRET_KEY set)")
    else:
        logger.warning("Stripe: NOT configured. Set STRIPE_SECRET_KEY in %s", _ENV_FILE)
    yield
    await database.dispose()


def _cors_headers(origin: str | None) -> dict[str, str]:
    """Add CORS headers to error responses so the browser doesn't block them."""
    headers = {
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
        "Access-Control-Allow-Headers": "Authorization, Content-Type",
    }
    if origin and origin in settings.cors_origins_list:
        headers["Access-Control-Allow-Origin"] = origin
    elif settings.cors_origins_list:
        headers["Access-Control-Allow-Origin"] = settings.cors_origins_list[0]
    return headers


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return actual error in JSON; include CORS so 500 responses are not blocked by browser."""
    origin = request.headers.get("origin")
    headers = _cors_headers(origin)
    if isinstance(exc, HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=headers,
        )
    logger.exception("Unhandled exception: %s", exc)
    detail = f"{type(exc).__name__}: {str(exc)}"
    return JSONResponse(
        status_code=500,
        content={"detail": detail},
        headers=headers,
    )


def create_app(database: Database | None = None) -> FastAPI:
    """Build the API around a database handle; one is created from settings if not given."""
    app = FastAPI(
        title="Doctors Portal API",
        description="Backend for Doctors Portal: treatments, bookings, payments, users, doctors",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.db = database or Database(settings.database_url, echo=settings.env == "development")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    app.include_router(appointment_options.router)
    app.include_router(bookings.router)
    app.include_router(payments.router)
    app.include_router(users.router)
    app.include_router(doctors.router)

    app.add_exception_handler(Exception, global_exception_handler)

    @app.get("/")
    async def root() -> str:
        return "Doctors portal server is running"

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
