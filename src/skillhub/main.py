# src/skillhub/main.py
"""Main entry point for the SkillHub application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from skillhub.api.v1 import (
    auth_router,
    learning_progress_router,
    learning_resources_router,
    notifications_router,
    posts_router,
    users_router,
)
from skillhub.core.settings import settings
from skillhub.db.session import init_store
from skillhub.services.errors import ServiceError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=f"{settings.app_name} API",
    description="Social learning network API",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(auth_router, prefix=settings.api_prefix)
app.include_router(users_router, prefix=settings.api_prefix)
app.include_router(posts_router, prefix=settings.api_prefix)
app.include_router(learning_progress_router, prefix=settings.api_prefix)
app.include_router(learning_resources_router, prefix=settings.api_prefix)
app.include_router(notifications_router, prefix=settings.api_prefix)

# Uploaded media, served under the same prefix stored on post records
app.mount(
    settings.media_url_root,
    StaticFiles(directory=settings.uploads_dir, check_dir=False),
    name="uploads",
)


@app.exception_handler(ServiceError)
async def service_error_handler(_request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests as 400 with a readable summary."""
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        details.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    message = "Invalid request"
    if details:
        message = f"{message}: {'; '.join(details)}"
    return JSONResponse(status_code=400, content={"message": message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Server error"})


@app.on_event("startup")
async def on_startup() -> None:
    settings.uploads_dir.mkdir(parents=True, exist_ok=True)
    init_store(settings.data_file)
    logger.info("%s %s ready", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": f"{settings.app_name} API",
        "version": settings.app_version,
        "description": "Social learning network API",
        "docs": "/docs",
        "redoc": "/redoc"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("skillhub.main:app", host="0.0.0.0", port=8080, reload=settings.debug)
