import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.logging_config import setup_logging
from app.core.redis_client import get_redis, close_redis
from app.api.public import observations, traces
from app.api.v1 import health, navigation, projects, support_chat

logger = logging.getLogger("lantern.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    # Startup
    setup_logging()
    await get_redis()
    logger.info("Lantern API started (%s)", settings.environment)
    yield
    # Shutdown
    await close_redis()


app = FastAPI(
    title="Lantern API",
    description="LLM Application Observability Platform",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["health"])
app.include_router(observations.router, prefix="/api/public/observations", tags=["observations"])
app.include_router(traces.router, prefix="/api/public/traces", tags=["traces"])
app.include_router(projects.router, prefix="/api/v1/projects", tags=["projects"])
app.include_router(navigation.router, prefix="/api/v1/navigation", tags=["navigation"])
app.include_router(support_chat.router, prefix="/api/v1/support-chat", tags=["support-chat"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Lantern API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
