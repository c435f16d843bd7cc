"""Meter Dashboard FastAPI Application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import get_settings
from api.routers import filters
from config.logging_config import setup_app_logging, get_logger

settings = get_settings()

setup_app_logging()
logger = get_logger("api")

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
    description="API for the electrical metering dashboard filter schemas",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(filters.router, prefix="/api/filters", tags=["Filters"])

logger.info(f"{settings.app_name} v{settings.version} ready")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "docs": "/docs",
        "endpoints": {
            "filters": "/api/filters",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    from config.config_loader import get_page_names

    return {
        "status": "healthy",
        "filter_pages": len(get_page_names()),
    }
