"""
Chat-related data models

These models define the messages shown in the widget, the conversation
state it renders, and the JSON shapes of the chat API.
"""

from enum import IntEnum
from pydantic import BaseModel, Field
from typing import Optional, List


class Role(IntEnum):
    """Sender tag of a message"""
    USER = 0
    BOT = 1


class Message(BaseModel):
    """A single chat bubble"""
    id: Role
    text: str
    name: Optional[str] = None


class ConversationState(BaseModel):
    """Everything the widget needs to render"""
    pending_input: str = ""
    messages: List[Message] = Field(default_factory=list)
    confirmation_banner: Optional[str] = None


class Confirmation(BaseModel):
    """A finalized booking sentence derived from a bot reply"""
    text: str
    requires_acknowledgement: bool = False


class TurnResult(BaseModel):
    """What one completed submission produced"""
    user_message: Message
    bot_message: Message
    confirmation: Optional[Confirmation] = None
    delivered: bool = True

    @property
    def alert(self) -> Optional[str]:
        if self.confirmation and self.confirmation.requires_acknowledgement:
            return self.confirmation.text
        return None


class ChatResponse(BaseModel):
    """Response model for chat interactions"""
    messages: List[Message]
    confirmation_banner: Optional[str] = None
    alert: Optional[str] = None
