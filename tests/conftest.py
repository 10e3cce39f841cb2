"""
Pytest configuration and shared fixtures for Travel Bot tests.
"""

import pytest
from unittest.mock import Mock

from travelbot.config import Settings
from travelbot.models.lex import BotResponse
from travelbot.services.lex_service import LexService


class FakeBot:
    """Stands in for LexService; replies from a queue and records calls."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def send_text(self, utterance, user_id):
        self.calls.append((utterance, user_id))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def test_settings():
    """Settings with a short bot timeout for testing."""
    return Settings(
        aws_region="us-east-1",
        lex_bot_name="BookTripMOBILEHUB",
        lex_bot_alias="$LATEST",
        lex_slot_prefix="BookTrip",
        bot_request_timeout=1.0,
    )


@pytest.fixture
def hotel_lex_response():
    """Raw post_text reply for a fulfilled hotel booking."""
    return {
        "intentName": "BookTripBookHotel",
        "slots": {
            "BookTripCheckInDate": "2026-11-02",
            "BookTripLocation": "Chicago",
            "BookTripNights": "3",
            "BookTripRoomType": "king",
        },
        "message": "Thanks, I have placed your reservation.",
        "dialogState": "Fulfilled",
    }


@pytest.fixture
def car_lex_response():
    """Raw post_text reply for a fulfilled car reservation."""
    return {
        "intentName": "BookTripBookCar",
        "slots": {
            "BookTripCarType": "midsize",
            "BookTripPickUpCity": "Seattle",
            "BookTripPickUpDate": "2026-12-01",
            "BookTripReturnDate": None,
        },
        "message": "Your car is reserved.",
        "dialogState": "Fulfilled",
    }


@pytest.fixture
def hotel_response(hotel_lex_response):
    return BotResponse.from_lex(hotel_lex_response, "BookTrip")


@pytest.fixture
def car_response(car_lex_response):
    return BotResponse.from_lex(car_lex_response, "BookTrip")


@pytest.fixture
def elicit_response():
    return BotResponse.from_lex({
        "intentName": "BookTripBookHotel",
        "slots": {"BookTripLocation": None},
        "message": "What city will you be staying in?",
        "dialogState": "ElicitSlot",
    }, "BookTrip")


@pytest.fixture
def mock_lex_client(hotel_lex_response):
    """Create a mock lex-runtime client for testing."""
    mock_client = Mock()
    mock_client.post_text.return_value = hotel_lex_response
    return mock_client


@pytest.fixture
def lex_service(test_settings, mock_lex_client):
    return LexService(test_settings, client=mock_lex_client)


@pytest.fixture
def make_bot():
    """Factory for FakeBot instances with queued replies."""
    return FakeBot
