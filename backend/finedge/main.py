"""
FinEdge - Main Application Entry Point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from finedge.api.router import api_router
from finedge.config import settings
from finedge.db.database import engine, init_db
from finedge.utils.exceptions import (
    ApiError,
    FinEdgeException,
    StorageUnavailableError,
    UnauthenticatedError,
)
from finedge.utils.logger import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events handler."""
    setup_logging()
    logger.info(f"Starting {settings.APP_NAME} ({settings.APP_ENV})...")

    await init_db()
    logger.info("Database initialized")

    yield

    logger.info(f"Shutting down {settings.APP_NAME}...")
    await engine.dispose()


def validation_message(exc: RequestValidationError) -> str:
    """
    Collapse pydantic errors into one sentence.

    Missing body/query fields become "Symbol and shares are required".
    """
    missing = [
        str(error["loc"][-1])
        for error in exc.errors()
        if error.get("type") == "missing" and error.get("loc")
    ]
    if missing:
        names = " and ".join(missing)
        verb = "is" if len(missing) == 1 else "are"
        return f"{names[0].upper()}{names[1:]} {verb} required"

    errors = exc.errors()
    if errors:
        error = errors[0]
        field = error["loc"][-1] if error.get("loc") else "request"
        return f"Invalid {field}: {error.get('msg', 'invalid value')}"
    return "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Map the exception hierarchy onto HTTP responses."""

    @app.exception_handler(UnauthenticatedError)
    async def unauthenticated_handler(request: Request, exc: UnauthenticatedError):
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)

    @app.exception_handler(FinEdgeException)
    async def domain_error_handler(request: Request, exc: FinEdgeException):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": validation_message(exc)},
        )

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
        error = StorageUnavailableError()
        return JSONResponse(status_code=error.status_code, content={"message": error.message})


def create_application() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.APP_NAME,
        description="Simulated stock trading with a virtual cash balance",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint for load balancers."""
        return {
            "status": "healthy",
            "app": settings.APP_NAME,
            "version": "1.0.0"
        }

    @app.get("/ready", tags=["Health"])
    async def readiness_check():
        """Readiness check - verifies the database is reachable."""
        checks = {"database": "unknown"}

        try:
            from sqlalchemy import text
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            checks["database"] = "connected"
        except SQLAlchemyError as e:
            checks["database"] = f"error: {str(e)[:50]}"

        all_healthy = all(v == "connected" for v in checks.values())

        return {
            "status": "ready" if all_healthy else "degraded",
            "checks": checks
        }

    @app.get("/metrics", tags=["Health"])
    async def metrics():
        """Basic metrics endpoint."""
        import psutil
        import os

        process = psutil.Process()
        return {
            "process": {
                "pid": os.getpid(),
                "memory_mb": process.memory_info().rss / 1024 / 1024,
                "cpu_percent": process.cpu_percent(),
            },
            "system": {
                "cpu_percent": psutil.cpu_percent(),
                "memory_percent": psutil.virtual_memory().percent,
            }
        }

    return app


# Create the application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "finedge.main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.DEBUG,
        log_level="info"
    )
