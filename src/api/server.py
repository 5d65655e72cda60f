#!/usr/bin/env python
"""FastAPI server for the Atelier jewelry asset studio."""

import sys
from contextlib import asynccontextmanager
from pathlib import Path

# Add src directory to Python path for imports
src_dir = Path(__file__).parent.parent
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import close_item_store, get_generation_service, get_item_store
from api.routers import assets, brand, core, items, templates
from utils.config import load_config, validate_config
from utils.logging import setup_logging

config = load_config()
setup_logging(config["log_level"], json_output=config["log_json"])
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the item catalog on startup and close it on shutdown."""
    for error in validate_config(config):
        logger.warning(f"Configuration: {error}")
    if not get_generation_service().is_configured():
        logger.warning("GEMINI_API_KEY not set; generation endpoints will return 503")

    await get_item_store()
    logger.info("Atelier API started")
    try:
        yield
    finally:
        await close_item_store()
        logger.info("Atelier API stopped")


app = FastAPI(title="Atelier API", version="1.0.0", lifespan=lifespan)

# CORS middleware for the studio frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=config["cors_origins"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(core.router)
app.include_router(assets.router)
app.include_router(templates.router)
app.include_router(brand.router)
app.include_router(items.router)
