"""
Stream Catalog

FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from . import __version__
from .config import get_settings
from .core.logging import setup_logging, get_logger
from .core.exceptions import register_exception_handlers
from .routers import content_router, profiles_router
from .routers.content import limiter
from .services.catalog import CatalogService, get_catalog_service

# Initialize
settings = get_settings()
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    catalog = get_catalog_service()
    logger.info(
        "app_startup",
        environment=settings.environment,
        debug=settings.debug,
        content=len(catalog.list_content()),
        profiles=len(catalog.list_profiles())
    )
    
    yield
    
    logger.info("app_shutdown")


# Create FastAPI app
app = FastAPI(
    title="Stream Catalog",
    description="Netflix-style content catalog with profiles, watchlists and watch history",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(content_router)
app.include_router(profiles_router)


@app.get("/")
async def root(catalog: CatalogService = Depends(get_catalog_service)):
    """Root endpoint with API info."""
    current = catalog.current_profile
    return {
        "service": "Stream Catalog",
        "version": __version__,
        "status": "running",
        "docs": "/docs" if settings.debug else "disabled",
        "currentProfile": current.name if current else None,
    }


@app.get("/health")
async def health():
    """Health check for load balancers."""
    return {"status": "healthy"}
