"""
Response interpreter

Decides whether a bot reply finalizes a booking and, if so, builds the
confirmation sentence shown above the chat feed.
"""

import logging
from enum import Enum
from typing import Dict, Optional, Tuple

from ..models.chat import Confirmation
from ..models.lex import BotResponse, DialogState

logger = logging.getLogger(__name__)


class IntentKind(Enum):
    HOTEL_BOOKING = "hotel_booking"
    CAR_BOOKING = "car_booking"
    UNRECOGNIZED = "unrecognized"


INTENT_NAMES: Dict[str, IntentKind] = {
    "BookTripBookHotel": IntentKind.HOTEL_BOOKING,
    "BookTripBookCar": IntentKind.CAR_BOOKING,
}

# kind -> (required slots, template, needs a blocking acknowledgement)
CONFIRMATIONS: Dict[IntentKind, Tuple[Tuple[str, ...], str, bool]] = {
    IntentKind.HOTEL_BOOKING: (
        ("checkInDate", "location", "nights", "roomType"),
        "Congratulations! Your trip to {location} with a {roomType} room on {checkInDate} "
        "for {nights} days has been booked!!",
        False,
    ),
    IntentKind.CAR_BOOKING: (
        ("carType", "pickUpCity", "pickUpDate"),
        "Congratulations! Your {carType} for pick up in {pickUpCity} on {pickUpDate} has been reserved!",
        True,
    ),
}


def classify_intent(intent_name: Optional[str]) -> IntentKind:
    """Map a bot intent name onto the kinds the widget knows about"""
    if not intent_name:
        return IntentKind.UNRECOGNIZED
    return INTENT_NAMES.get(intent_name, IntentKind.UNRECOGNIZED)


def interpret(response: BotResponse) -> Optional[Confirmation]:
    """
    Build the confirmation for a bot reply, if any

    Args:
        response: Reply from the bot service

    Returns:
        Confirmation for a fulfilled hotel or car booking with all slots
        filled, otherwise None
    """
    if response.dialog_state is not DialogState.FULFILLED:
        return None

    kind = classify_intent(response.intent_name)
    if kind is IntentKind.UNRECOGNIZED:
        logger.debug(f"No confirmation for fulfilled intent {response.intent_name!r}")
        return None

    required, template, acknowledge = CONFIRMATIONS[kind]
    missing = [name for name in required if not response.slots.get(name)]
    if missing:
        logger.warning(
            f"Fulfilled {response.intent_name} response is missing slots {missing}; no confirmation shown"
        )
        return None

    values = {name: response.slots[name] for name in required}
    return Confirmation(text=template.format(**values), requires_acknowledgement=acknowledge)
