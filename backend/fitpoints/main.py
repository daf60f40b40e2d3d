"""Fitpoints - FastAPI Application Entry Point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from fitpoints.config import get_settings
from fitpoints.database import engine, Base
from fitpoints.logging_config import setup_logging
from fitpoints import models  # noqa: F401  registers tables on Base.metadata
from fitpoints.routers import (
    habits_router,
    points_router,
    notes_router,
    plans_router,
    admin_router,
)


settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup: Configure logging and create database tables
    setup_logging()
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(
    title="Fitpoints API",
    description="Habit points ledger and training plan import for coached students",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        settings.frontend_url,
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(habits_router, prefix="/api/v1")
app.include_router(points_router, prefix="/api/v1")
app.include_router(notes_router, prefix="/api/v1")
app.include_router(plans_router, prefix="/api/v1")
app.include_router(admin_router, prefix="/api/v1")


@app.get("/")
def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "healthy"}
