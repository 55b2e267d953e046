# filma/main.py
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from datetime import datetime, timezone
from contextlib import asynccontextmanager
from typing import Optional
from sqlalchemy.engine import make_url
import logging
import uuid
from filma.api.routes import api_router
from filma.core.config import Settings, get_settings
from filma.core.database import DatabaseHelper
from filma.core.exceptions import AppException, DatabaseError, ValidationError

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=logging.INFO if settings.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        masked_db_url = make_url(settings.db.DATABASE_URL).render_as_string(hide_password=True)
        logger.info(f"🚀 Starting {settings.app_name} on port {settings.port}")
        logger.info(f"📝 Database: {masked_db_url}")

        db_helper = DatabaseHelper(
            url=settings.db.DATABASE_URL,
            echo=settings.db.DB_ECHO,
            pool_size=settings.db.DB_POOL_SIZE,
            max_overflow=settings.db.DB_MAX_OVERFLOW,
        )
        app.state.db_helper = db_helper

        try:
            if settings.db.DB_CREATE_TABLES:
                await db_helper.create_tables()
                logger.info("🗄️ Tables created (if missing)")
            await db_helper.ping()
            logger.info("✅ Database connection successful")
        except Exception as e:
            logger.error(f"❌ Database connection failed: {e}")
            await db_helper.dispose()
            raise

        try:
            yield
        finally:
            # Shutdown
            await db_helper.dispose()
            logger.info("👋 Application shutdown complete")

    app = FastAPI(
        title=settings.app_name,
        description="API pour gérer les films",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url=settings.docs_url,
        redoc_url=None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.get("/health", summary="Health check", tags=["health"])
    async def health_check(request: Request):
        """Vérifie l'état de l'application et de la base"""
        try:
            db_value = await request.app.state.db_helper.ping()
            return {
                "status": "healthy",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "database": "connected",
                "database_ping": db_value,
                "app_name": settings.app_name,
            }
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={
                    "status": "unhealthy",
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                    "database": "connection failed",
                },
            )

    register_exception_handlers(app)
    return app


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        # DatabaseError est déjà journalisée avec sa cause dans le repository
        if not isinstance(exc, DatabaseError):
            logger.warning(f"{type(exc).__name__}: {exc.detail} ({request.method} {request.url.path})")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        error = ValidationError(errors=jsonable_encoder(exc.errors()))
        logger.warning(f"Invalid request on {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Route ou méthode inconnue : même réponse catch-all
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"message": "Route non trouvée"},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        reference = uuid.uuid4().hex
        logger.exception(f"Unhandled exception [reference={reference}]: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Erreur interne du serveur",
                "code": "INTERNAL_ERROR",
                "reference": reference,
            },
        )


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "filma.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if settings.debug else "warning",
    )


if __name__ == "__main__":
    run()
