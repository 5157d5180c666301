"""
FastAPI Application Entry Point
"""
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional

from app.core.config import Settings, get_settings
from app.core.database import build_engine, build_session_factory, init_db
from app.core.exceptions import error_body, register_exception_handlers
from app.core.logging import logger, setup_logging
from app.api.v1 import jobs
from app.repositories.job_repository import JobRepository


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.APP_NAME} backend ({settings.ENVIRONMENT})")

    # Fail fast: no degraded mode without a database
    try:
        init_db(app.state.engine)
    except SQLAlchemyError as e:
        logger.critical(f"Database connection failed: {e}")
        raise
    logger.info("Database connected successfully")

    yield

    logger.info(f"Shutting down {settings.APP_NAME} backend")
    app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build an app instance with its own engine and session factory"""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Job listing backend: create, search, fetch and delete job postings",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)

    allowed_origins = set(settings.CORS_ORIGINS)

    @app.middleware("http")
    async def reject_foreign_origins(request: Request, call_next):
        origin = request.headers.get("origin")
        if origin is not None and origin not in allowed_origins:
            logger.warning(f"Rejected request from origin {origin}")
            return JSONResponse(
                status_code=status.HTTP_403_FORBIDDEN,
                content=error_body("Not allowed by CORS"),
            )
        return await call_next(request)

    # CORS Middleware (added last so it wraps the origin guard)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(jobs.router, prefix="/api/jobs", tags=["Jobs"])

    @app.get("/", tags=["Root"], response_class=PlainTextResponse)
    def root():
        """Liveness message"""
        return "Job Portal Backend is running"

    @app.get("/health", tags=["Health"])
    def health_check():
        """Health check endpoint"""
        db = app.state.session_factory()
        try:
            connected = JobRepository(db).ping()
        finally:
            db.close()
        return {
            "status": "healthy" if connected else "degraded",
            "environment": settings.ENVIRONMENT,
            "database": "connected" if connected else "unavailable",
        }

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn"""
    import uvicorn

    settings = get_settings()
    setup_logging(settings)
    logger.info(f"Server is running on port {settings.PORT}")
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
    )


if __name__ == "__main__":
    run()
