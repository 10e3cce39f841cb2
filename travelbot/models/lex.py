"""
Lex data models

These models define the structure of the replies the BookTrip bot
sends back, reduced to the fields the widget interprets.
"""

from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any


class DialogState(str, Enum):
    """Whether the bot's current turn has completed"""
    IN_PROGRESS = "in-progress"
    FULFILLED = "fulfilled"
    OTHER = "other"


# Lex reports several "still gathering" states; all of them mean in progress
LEX_DIALOG_STATES = {
    "Fulfilled": DialogState.FULFILLED,
    "ElicitIntent": DialogState.IN_PROGRESS,
    "ElicitSlot": DialogState.IN_PROGRESS,
    "ConfirmIntent": DialogState.IN_PROGRESS,
    "InProgress": DialogState.IN_PROGRESS,
}


def parse_dialog_state(value: Optional[str]) -> DialogState:
    """Map a raw Lex dialogState string onto DialogState"""
    if value is None:
        return DialogState.OTHER
    return LEX_DIALOG_STATES.get(value, DialogState.OTHER)


def normalize_slot_name(name: str, prefix: str = "") -> str:
    """
    Strip the bot prefix from a Lex slot name

    BookTripCheckInDate -> checkInDate, BookTripLocation -> location
    """
    if prefix and name.startswith(prefix) and len(name) > len(prefix):
        name = name[len(prefix):]
    return name[:1].lower() + name[1:]


class BotResponse(BaseModel):
    """Represents one reply from the bot service"""
    reply_text: str = ""
    dialog_state: DialogState = DialogState.OTHER
    intent_name: Optional[str] = None
    slots: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_lex(cls, response: Dict[str, Any], slot_prefix: str = "") -> "BotResponse":
        """
        Build a BotResponse from a raw lex-runtime post_text reply

        Args:
            response: Dictionary returned by boto3
            slot_prefix: Bot prefix to strip from slot names

        Returns:
            BotResponse with normalized dialog state and slot names
        """
        raw_slots = response.get("slots") or {}
        slots = {
            normalize_slot_name(name, slot_prefix): str(value)
            for name, value in raw_slots.items()
            if value is not None
        }
        return cls(
            reply_text=response.get("message") or "",
            dialog_state=parse_dialog_state(response.get("dialogState")),
            intent_name=response.get("intentName"),
            slots=slots,
        )
