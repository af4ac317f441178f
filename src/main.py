"""SEOScope API - Website SEO Analysis."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import analyses_router, health_router
from config import settings
from db.session import create_tables

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup when configured; log lifecycle."""
    logger.info(f"Starting {settings.app_name}...")
    if settings.auto_create_tables:
        await create_tables()
    yield
    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title="SEOScope API",
    description="Scores a website across on-page, technical, content, performance and other SEO categories.",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for the dashboard
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router, prefix="/api/v1")
app.include_router(analyses_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def root():
    """Point clients at the API docs."""
    return {
        "service": "SEOScope API",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
