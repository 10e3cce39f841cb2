"""
Data models for Travel Bot

This module contains all Pydantic models for data validation and serialization.
"""

from .chat import (
    ChatResponse,
    Confirmation,
    ConversationState,
    Message,
    Role,
    TurnResult,
)
from .lex import BotResponse, DialogState

__all__ = [
    "BotResponse",
    "ChatResponse",
    "Confirmation",
    "ConversationState",
    "DialogState",
    "Message",
    "Role",
    "TurnResult",
]
