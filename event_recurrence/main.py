"""Main FastAPI application for the recurring event instance generator."""
from fastapi import FastAPI

from .middleware.cors import add_cors_middleware
from .routers import recurrence_router

app = FastAPI(
    title="Recurring Event Instance API",
    description="Expands daily and weekly recurrence rules into dated instances tagged against a viewing window",
    version="1.0.0",
)

add_cors_middleware(app)

app.include_router(recurrence_router, prefix="/api")


@app.get("/health")
async def health():
    """Liveness probe."""
    return {"status": "healthy"}
