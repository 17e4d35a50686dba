# Main application entry point
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import auth_router, collection_router, health_router, records_router, users_router
from .config import get_settings
from .core.exceptions import (
    ConflictError,
    NotFoundError,
    RecordVaultError,
    StorageError,
    UnauthorizedError,
)
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import ErrorResponse
from .database import create_tables, engine

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting RecordVault application",
        extra={
            "version": settings.app_version,
            "environment": settings.environment,
            "debug": settings.debug,
        },
    )

    if settings.create_tables_on_startup:
        await create_tables()
        logger.info("Database tables created/verified")

    yield

    logger.info("Shutting down RecordVault application")
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Personal record collection API",
    version=settings.app_version,
    lifespan=lifespan,
)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, exc: Exception, message: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=type(exc).__name__, message=message or str(exc))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return _error(status.HTTP_404_NOT_FOUND, exc)


@app.exception_handler(UnauthorizedError)
async def unauthorized_handler(request: Request, exc: UnauthorizedError):
    response = _error(status.HTTP_401_UNAUTHORIZED, exc)
    response.headers["WWW-Authenticate"] = "Bearer"
    return response


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError):
    return _error(status.HTTP_409_CONFLICT, exc)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage failure on {request.method} {request.url.path}", exc_info=exc)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc, "Internal server error")


@app.exception_handler(RecordVaultError)
async def domain_error_handler(request: Request, exc: RecordVaultError):
    logger.error(f"Unhandled domain error on {request.method} {request.url.path}", exc_info=exc)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc, "Internal server error")


# Include routers
app.include_router(auth_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(records_router, prefix="/api")
app.include_router(collection_router, prefix="/api")
app.include_router(health_router, prefix="/api")


# API root endpoint for better navigation
@app.get("/api/")
async def api_root():
    return {
        "message": "RecordVault API",
        "version": settings.app_version,
        "documentation": {
            "swagger_ui": "/docs",
            "redoc": "/redoc",
            "openapi_json": "/openapi.json",
        },
        "endpoints": {
            "authentication": "/api/auth/",
            "users": "/api/users/",
            "records": "/api/records/",
            "collection": "/api/collection/",
            "health": "/api/health",
        },
    }


def run():
    import uvicorn

    uvicorn.run(
        "recordvault.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run()
