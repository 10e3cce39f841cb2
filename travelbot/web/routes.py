"""
Web routes for Travel Bot

This module contains the FastAPI routes for the chat widget: the page
itself, input changes, and message submission.
"""

from fastapi import APIRouter, Depends, Request, Form, HTTPException
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates
from pathlib import Path
from typing import Optional
import json
import logging

from ..config import get_settings
from ..exceptions import SubmissionInProgressError
from ..models.chat import ChatResponse, ConversationState
from ..services import Conversation, LexService
from ..utils.debug_logger import debug_logger
from ..analytics import capture_event

logger = logging.getLogger(__name__)

# Initialize router
router = APIRouter()

# Templates setup
BASE_DIR = Path(__file__).parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

settings = get_settings()

# The widget keeps a single conversation; created on first use
_conversation: Optional[Conversation] = None


def get_conversation() -> Conversation:
    """Return the widget's conversation, creating it on first use"""
    global _conversation
    if _conversation is None:
        _conversation = Conversation(LexService(settings), settings)
    return _conversation


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "-")


@router.get("/", response_class=HTMLResponse)
def index(request: Request, conversation: Conversation = Depends(get_conversation)) -> HTMLResponse:
    """Serve the chat widget; loading the page starts a new conversation"""
    conversation.reset()
    debug_logger.log_route(_request_id(request), "New conversation started", request)
    capture_event("page_home", {"path": str(request.url.path)},
                  distinct_id=getattr(request.state, "session_id", None))
    return templates.TemplateResponse(request, "index.html", {
        "state": conversation.snapshot(),
        "bot_name": settings.bot_display_name,
    })


@router.get("/state", response_model=ConversationState)
def state(conversation: Conversation = Depends(get_conversation)) -> ConversationState:
    """Current conversation as JSON"""
    return conversation.snapshot()


@router.post("/input", status_code=204)
def update_input(text: str = Form(""), conversation: Conversation = Depends(get_conversation)) -> Response:
    """Mirror the input box into the conversation"""
    conversation.set_input(text)
    return Response(status_code=204)


@router.post("/chat")
async def chat(
    request: Request,
    text: Optional[str] = Form(None),
    conversation: Conversation = Depends(get_conversation),
):
    """
    Submit the pending input to the bot (HTMX and JSON)

    - If text is posted it replaces the pending input first
    - If HX-Request header is present (HTMX), returns an HTML fragment
    - Otherwise, returns a JSON ChatResponse
    """
    request_id = _request_id(request)
    session_id = getattr(request.state, "session_id", None)

    if text is not None:
        conversation.set_input(text)

    debug_logger.log_route(request_id, f"Chat submit: '{conversation.pending_input[:50]}'", request)

    try:
        turn = await conversation.submit()
    except SubmissionInProgressError as e:
        debug_logger.log_route(request_id, "Rejected submit while a reply is pending", request)
        raise HTTPException(status_code=e.http_status, detail=str(e))

    if turn is None:
        raise HTTPException(status_code=400, detail="text is required")

    capture_event("chat_message", {"text_length": len(turn.user_message.text)}, distinct_id=session_id)
    if not turn.delivered:
        capture_event("bot_unreachable", {}, distinct_id=session_id)
    if turn.confirmation is not None:
        capture_event("booking_confirmed", {"alert": turn.alert is not None}, distinct_id=session_id)

    banner = conversation.confirmation_banner
    if request.headers.get("HX-Request"):
        response = templates.TemplateResponse(request, "_turn.html", {
            "messages": [turn.user_message, turn.bot_message],
            "banner": banner,
        })
        if turn.alert:
            # The page shows a blocking alert when it sees this event
            response.headers["HX-Trigger"] = json.dumps({"bookingAlert": turn.alert})
        return response

    return ChatResponse(
        messages=[turn.user_message, turn.bot_message],
        confirmation_banner=banner,
        alert=turn.alert,
    )
