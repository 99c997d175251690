import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from supermemo2 import __version__
from supermemo2.config import get_settings
from supermemo2.routers import items_router

load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    settings = get_settings()
    logging.basicConfig(level=settings.log_level_value)
    logger.info("%s %s starting", settings.app_name, __version__)
    logger.info("CORS origins: %s", ", ".join(settings.cors_origins) or "(none)")

    yield

    # Shutdown
    logger.info("%s shutting down", settings.app_name)


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Stateless SuperMemo-2 review engine",
    version=__version__,
    lifespan=lifespan,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(items_router)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "endpoints": {
            "health": "/healthz",
            "new_item": "/items/new",
            "review": "/items/review",
        },
    }


@app.get("/healthz")
async def healthz():
    """Health check endpoint."""
    return {"status": "healthy"}
