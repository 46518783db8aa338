"""
api/main.py — FastAPI application entry point.

Run with:
    uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from api.endpoints.email_routes import router as email_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# ── Lifespan ─────────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown logic."""
    logger.info(
        "Email builder ready (escape_user_text=%s, max_image_bytes=%d).",
        settings.escape_user_text, settings.max_image_bytes,
    )
    yield
    logger.info("Application shutting down.")


# ── App ───────────────────────────────────────────────────────────────────────

app = FastAPI(
    title="HTML Email Builder",
    description=(
        "Turns a filled-in email form into a self-contained HTML email that "
        "renders in legacy clients, ready to preview, copy or download."
    ),
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(email_router, prefix="/emails", tags=["Emails"])


# ── Health check ─────────────────────────────────────────────────────────────

@app.get("/health", tags=["System"])
def health_check():
    """Returns service liveness status."""
    return {"status": "ok", "service": "html-email-builder"}


@app.get("/", tags=["System"])
def root():
    return {
        "message": "HTML Email Builder is running.",
        "docs": "/docs",
    }
