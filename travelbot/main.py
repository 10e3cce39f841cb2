"""
Travel Bot FastAPI Application

This is the main FastAPI application entry point.
It sets up the app, middleware, and includes all routes.
"""

import logging
from fastapi import FastAPI

from .config import get_settings
from .web.routes import router as web_router
from .middleware.timing import TimingMiddleware
from .middleware.session import SessionMiddleware
from .analytics import get_posthog_client, capture_event

settings = get_settings()

logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Travel Bot",
    version="0.1.0",
    description="Chat widget for the BookTrip Lex bot"
)

# Session middleware runs inside timing middleware so errors are still timed
app.add_middleware(SessionMiddleware)
app.add_middleware(TimingMiddleware)

# Include web routes
app.include_router(web_router)


@app.on_event("startup")
async def startup_event():
    """Initialize analytics and capture server start event"""
    if get_posthog_client():
        capture_event("server_start", {"app_version": app.version})
        logger.info("Analytics initialized: PostHog enabled")
    else:
        logger.info("Analytics initialized: PostHog disabled")
    logger.info(f"Using bot {settings.lex_bot_name} ({settings.lex_bot_alias}) in {settings.aws_region}")


# Health check endpoint
@app.get("/health")
def health_check():
    """Health check endpoint for monitoring"""
    return {"status": "healthy", "service": "travelbot"}
