"""FastAPI application configuration.

Main entry point for the Password Strength REST API.
Serves strength classification and field validation for a password input,
with security headers and restrictive CORS configuration.
"""

import logging
import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import API_VERSION, CORS_ORIGINS, configure_logging
from api.routes import health_router, strength_router


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    configure_logging()
    logger.info("Password Strength API %s starting", API_VERSION)
    yield
    logger.info("Password Strength API shutting down")


app = FastAPI(
    title="Password Strength API",
    description="""
    Inline strength feedback for a password input:
    - Easy / Medium / Strong classification from character classes
    - Required and minimum length validation
    - Latin and Cyrillic letters
    """,
    version=API_VERSION,
    lifespan=lifespan
)


# Security headers middleware
@app.middleware("http")
async def add_security_headers(request: Request, call_next) -> Response:
    """Add security headers to all responses.

    Password values travel in request bodies, so responses must never be
    cached or framed.
    """
    response = await call_next(request)

    # Prevent MIME type sniffing
    response.headers["X-Content-Type-Options"] = "nosniff"

    # Prevent clickjacking
    response.headers["X-Frame-Options"] = "DENY"

    # Content Security Policy - restrictive default
    response.headers["Content-Security-Policy"] = "default-src 'self'; frame-ancestors 'none'"

    # Control referrer information
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

    # Prevent caching of sensitive responses
    response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, private"
    response.headers["Pragma"] = "no-cache"

    return response


# CORS configuration - only the origins serving the password input
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "Accept",
        "Origin",
    ],
    max_age=600,  # Cache preflight requests for 10 minutes
)

# Register routers
app.include_router(health_router)
app.include_router(strength_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
