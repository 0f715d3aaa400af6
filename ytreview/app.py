"""
FastAPI application serving the timeline endpoints.
"""

import os
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ytreview import __version__
from ytreview.middleware import SecurityHeadersMiddleware
from ytreview.routes import timeline_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Configuration from environment variables
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Timeline service {__version__} starting")
    yield
    logger.info("Timeline service stopped")


app = FastAPI(title="YouTube Review Timeline", version=__version__, lifespan=lifespan)

app.add_middleware(SecurityHeadersMiddleware)

# CORS middleware (must be last to apply first)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(timeline_router)


@app.get("/health")
async def health():
    return {"status": "healthy"}
