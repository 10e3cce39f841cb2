"""
Services layer for Travel Bot

This module contains the conversation state holder, the response
interpreter and the client for the external bot service.
"""

from .conversation import Conversation
from .interpreter import IntentKind, classify_intent, interpret
from .lex_service import LexService

__all__ = [
    "Conversation",
    "IntentKind",
    "LexService",
    "classify_intent",
    "interpret",
]
