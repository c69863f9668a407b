# src/inkwell/main.py
"""Main entry point for the Inkwell application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inkwell.api.v1 import (
    auth_router,
    comments_router,
    posts_router,
    subscriptions_router,
    users_router,
)
from inkwell.core.errors import InkwellError, status_for
from inkwell.core.logging import configure_logging
from inkwell.core.settings import settings
from inkwell.db.session import create_tables

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    "Welcome to the Inkwell API!\n\n"
    "Available endpoints:\n"
    "- POST /api/v1/auth/register - Create an account\n"
    "- POST /api/v1/auth/login - Obtain a bearer token\n"
    "- GET /api/v1/posts - View all posts\n"
    "- POST /api/v1/posts - Create a new post\n"
    "- GET /api/v1/posts/{id} - Get a specific post with its comments\n"
    "- PATCH, DELETE /api/v1/posts/{id} - Edit or remove your post\n"
    "- GET, POST /api/v1/posts/{id}/comments - Read or add comments\n"
    "- PATCH, DELETE /api/v1/posts/{id}/comments/{comment_id} - Edit or remove your comment\n"
    "- GET, POST /api/v1/subscriptions - List or add subscriptions\n"
    "- DELETE /api/v1/subscriptions/{author_id} - Unsubscribe\n\n"
    "Query Parameters:\n"
    "- Use ?fields=id,title to filter post list fields\n"
    "- Example: /api/v1/posts?fields=id,title,created_at\n"
)

# Initialize FastAPI app
app = FastAPI(
    title="Inkwell API",
    description="Multi-user blog API where only owners may change their content",
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

# Include API routers
app.include_router(auth_router, prefix="/api/v1")
app.include_router(users_router, prefix="/api/v1")
app.include_router(posts_router, prefix="/api/v1")
app.include_router(comments_router, prefix="/api/v1")
app.include_router(subscriptions_router, prefix="/api/v1")


@app.exception_handler(InkwellError)
async def handle_domain_error(request: Request, exc: InkwellError) -> JSONResponse:
    """Render a domain failure with the status from the error taxonomy."""
    status_code = status_for(exc)
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.code)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.code},
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies, paths and queries as a plain 400."""
    logger.warning("Invalid input for %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid input"},
    )


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging(settings.log_level)
    if settings.auto_create_tables:
        create_tables()
    logger.info("%s %s started", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint listing the available routes."""
    return {"message": WELCOME_MESSAGE}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("inkwell.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
