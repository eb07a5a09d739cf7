"""FastAPI application entry point for the pagination contract demo API."""

import logging

from src.paging.config import get_settings

settings = get_settings()

# Configure logging before importing modules
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from src.paging.api.exception_handlers import register_exception_handlers  # noqa: E402
from src.paging.api.routers import api_router  # noqa: E402

app = FastAPI(
    title="Paging Contracts",
    description="Schema-driven pagination requests and response envelopes",
    version="0.1.0",
)

# CORS middleware for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routers
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
