"""
Blog Data API

Serves the generated blog-data.json for the client helpers.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogdata.config import get_settings
from blogdata.middleware import RequestIDMiddleware
from blogdata.routers import blog_data
from blogdata.services.http_client import close_shared_client

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown."""
    yield
    await close_shared_client()


app = FastAPI(
    title="Blog Data API",
    description="Serves the blog post collection built from markdown files",
    version="0.1.0",
    lifespan=lifespan,
)

# Request ID (runs first — outermost middleware)
app.add_middleware(RequestIDMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(blog_data.router)


@app.get("/health")
async def health_check() -> dict[str, Any]:
    """Report whether the data file has been generated."""
    data_status = "ok" if blog_data.data_file_exists() else "missing"
    if data_status != "ok":
        logger.warning("Health check degraded — blog data file missing")
    return {
        "status": "ok" if data_status == "ok" else "degraded",
        "service": "blog-data",
        "checks": {"data_file": data_status},
    }
