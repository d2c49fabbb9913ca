"""CORS configuration for the recurrence API."""
from fastapi.middleware.cors import CORSMiddleware

from ..config import ENVIRONMENT, FRONTEND_URL
from ..utils.logger import get_logger

logger = get_logger("recurrence-api")

# Base allowed origins for development
ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

# Add production frontend URL if provided
if FRONTEND_URL and FRONTEND_URL not in ALLOWED_ORIGINS:
    ALLOWED_ORIGINS.append(FRONTEND_URL)


def add_cors_middleware(app):
    """Add CORS middleware to the FastAPI application."""
    # In production, use allow_origin_regex for wildcard support (Vercel deployments)
    if ENVIRONMENT == "production":
        logger.info("Using production CORS with Vercel wildcard support")
        app.add_middleware(
            CORSMiddleware,
            allow_origin_regex=r"https://.*\.vercel\.app",
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        logger.info("Using development CORS", origins=ALLOWED_ORIGINS)
        app.add_middleware(
            CORSMiddleware,
            allow_origins=ALLOWED_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
