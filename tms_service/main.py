import logging
import time
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import Settings, get_settings
from .core.database import Database
from .core.events import EventPublisher
from .routers import include_entity_routers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize application on startup, release resources on shutdown"""
    settings = app.state.settings
    logger.info(f"Starting {settings.service_name}...")

    if settings.create_schema_on_startup:
        if app.state.database.init_db():
            logger.info("Database initialized successfully")
        else:
            logger.error("Database initialization failed")

    if app.state.events.connect():
        logger.info("RabbitMQ connection established")
    elif settings.events_enabled:
        logger.warning("RabbitMQ connection failed - events will not be published")

    logger.info(f"{settings.service_name} startup completed")
    yield

    logger.info(f"Shutting down {settings.service_name}...")
    app.state.events.close()
    app.state.database.dispose()
    logger.info(f"{settings.service_name} shutdown completed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application from explicit settings.

    Args:
        settings: Configuration to use; read from the environment if omitted

    Returns:
        FastAPI: Application with one CRUD router per entity
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = FastAPI(
        title="Task Management Service",
        description="CRUD backend for companies, boards, users and tasks",
        version=settings.service_version,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.database = Database(settings)
    app.state.events = EventPublisher(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed payloads are bad requests"""
        logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())}
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions"""
        logger.exception(f"Unhandled exception: {exc}")

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "type": "internal_error",
                    "status_code": 500,
                    "message": "Internal server error" if not settings.debug else str(exc),
                    "path": str(request.url.path),
                    "timestamp": time.time()
                }
            }
        )

    include_entity_routers(app, settings.api_prefix)

    @app.get("/", tags=["service"])
    async def root():
        """Root endpoint"""
        return {
            "service": settings.service_name,
            "version": settings.service_version,
            "status": "running",
            "message": "Task Management Service is operational"
        }

    @app.get("/health", tags=["service"])
    def health_check(request: Request):
        """Health check endpoint"""
        db_healthy = request.app.state.database.check_connection()

        return {
            "service": settings.service_name,
            "version": settings.service_version,
            "status": "healthy" if db_healthy else "unhealthy",
            "database": "connected" if db_healthy else "disconnected",
            "timestamp": time.time()
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "tms_service.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
