"""
Session Middleware for Travel Bot

Gives each browser a session_id cookie. The widget uses it to tag
analytics events; it refreshes on every request.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
import uuid
import random
import logging
from ..config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

SESSION_COOKIE = "session_id"
SESSION_MAX_AGE = 1800

# Human-readable word prefixes for session IDs
WORDS = ["alpha", "bravo", "charlie", "delta", "echo", "foxtrot",
         "golf", "hotel", "india", "juliet", "kilo", "lima", "mike"]


def generate_session_id() -> str:
    """Generate a human-readable session ID with word prefix and UUID"""
    word = random.choice(WORDS)
    return f"web-{word}-{uuid.uuid4()}"


class SessionMiddleware(BaseHTTPMiddleware):
    """
    Middleware that manages the widget session cookie.

    - Generates a session ID for new visitors
    - Exposes it as request.state.session_id
    - Refreshes the cookie (httponly, samesite) on every response
    """

    async def dispatch(self, request, call_next):
        session_id = request.cookies.get(SESSION_COOKIE)
        if not session_id:
            session_id = generate_session_id()
            if settings.debug:
                logger.debug(f"Generated new session_id: {session_id}")

        request.state.session_id = session_id
        response: Response = await call_next(request)

        response.set_cookie(
            SESSION_COOKIE,
            session_id,
            httponly=True,
            samesite="lax",
            max_age=SESSION_MAX_AGE,
        )
        return response
