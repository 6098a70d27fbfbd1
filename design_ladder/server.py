"""
Design Ladder Server
====================

FastAPI server for the poster editor's design feedback engine.

Features:
- Design score with weighted sub-scores per design dimension
- Per-element suggestion cards with concrete fixes
- Summary tips for the suggestions sidebar
- Stable suggestion keys for ignore/restore state in the editor
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from .models.config_models import FeedbackConfig
from .models.suggestion_models import SUGGESTION_TYPES
from .feedback.color_model import COLOR_MAP

# Import API routers
from .api import feedback_routes


# Shared config instance
feedback_config: FeedbackConfig = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    global feedback_config

    logger.info("[DESIGN-LADDER] Starting up...")

    feedback_config = FeedbackConfig.from_env()

    # Inject into route modules
    feedback_routes.feedback_config = feedback_config

    logger.info(
        f"[DESIGN-LADDER] Feedback engine ready "
        f"(min_spacing={feedback_config.min_spacing}, max_tips={feedback_config.max_tips})"
    )

    yield

    logger.info("[DESIGN-LADDER] Shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Design Ladder",
    description="Live design-quality feedback for the poster editor",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(feedback_routes.router)


@app.get("/")
async def root():
    """Return API info."""
    return {
        "service": "Design Ladder",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "feedback": "/api/feedback",
            "suggestion_key": "/api/feedback/suggestion-key",
            "readability": "/api/feedback/readability"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "design-ladder",
        "config_loaded": feedback_config is not None
    }


@app.get("/api/info")
async def api_info():
    """Get scoring weights, named colors and suggestion types."""
    config = feedback_config or FeedbackConfig()
    return {
        "service": "Design Ladder",
        "version": "1.0.0",
        "weights": config.weights.model_dump(),
        "min_spacing_px": config.min_spacing,
        "max_tips": config.max_tips,
        "colors": [{"name": name, "hex": hex_value} for name, hex_value in COLOR_MAP.items()],
        "suggestion_types": SUGGESTION_TYPES
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "design_ladder.server:app",
        host="0.0.0.0",
        port=8080,
        reload=True
    )
