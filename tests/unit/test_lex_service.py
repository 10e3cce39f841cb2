"""
Unit tests for LexService and the BotResponse conversion.
"""

import pytest
from unittest.mock import patch
from botocore.exceptions import ClientError, EndpointConnectionError

from travelbot.exceptions import BotServiceError
from travelbot.models.lex import BotResponse, DialogState, normalize_slot_name, parse_dialog_state
from travelbot.services.lex_service import LexService


class TestBotResponseFromLex:

    def test_hotel_reply(self, hotel_lex_response):
        response = BotResponse.from_lex(hotel_lex_response, "BookTrip")

        assert response.reply_text == "Thanks, I have placed your reservation."
        assert response.dialog_state is DialogState.FULFILLED
        assert response.intent_name == "BookTripBookHotel"
        assert response.slots == {
            "checkInDate": "2026-11-02",
            "location": "Chicago",
            "nights": "3",
            "roomType": "king",
        }

    def test_null_slots_are_dropped(self, car_lex_response):
        response = BotResponse.from_lex(car_lex_response, "BookTrip")
        assert "returnDate" not in response.slots

    def test_reply_without_intent(self):
        response = BotResponse.from_lex({"message": "Sorry, can you repeat that?", "dialogState": "ElicitIntent"})

        assert response.dialog_state is DialogState.IN_PROGRESS
        assert response.intent_name is None
        assert response.slots == {}

    @pytest.mark.parametrize("raw,expected", [
        ("Fulfilled", DialogState.FULFILLED),
        ("ElicitSlot", DialogState.IN_PROGRESS),
        ("ConfirmIntent", DialogState.IN_PROGRESS),
        ("InProgress", DialogState.IN_PROGRESS),
        ("ReadyForFulfillment", DialogState.OTHER),
        ("Failed", DialogState.OTHER),
        (None, DialogState.OTHER),
    ])
    def test_dialog_state_mapping(self, raw, expected):
        assert parse_dialog_state(raw) is expected

    def test_slot_name_without_prefix_is_kept(self):
        assert normalize_slot_name("Location", "BookTrip") == "location"
        assert normalize_slot_name("BookTrip", "BookTrip") == "bookTrip"


class TestLexService:

    def test_send_posts_text(self, lex_service, mock_lex_client):
        response = lex_service.send("BookTripMOBILEHUB", "book a hotel", "widget-1")

        mock_lex_client.post_text.assert_called_once_with(
            botName="BookTripMOBILEHUB",
            botAlias="$LATEST",
            userId="widget-1",
            inputText="book a hotel",
        )
        assert response.intent_name == "BookTripBookHotel"
        assert response.slots["location"] == "Chicago"

    def test_send_text_uses_configured_bot(self, lex_service, mock_lex_client):
        lex_service.send_text("hello", "widget-2")
        assert mock_lex_client.post_text.call_args.kwargs["botName"] == "BookTripMOBILEHUB"

    def test_client_error_becomes_bot_service_error(self, lex_service, mock_lex_client):
        error = ClientError({"Error": {"Code": "NotFoundException", "Message": "bot not found"}}, "PostText")
        mock_lex_client.post_text.side_effect = error

        with pytest.raises(BotServiceError) as exc_info:
            lex_service.send_text("hello", "widget-3")

        assert exc_info.value.original_exception is error

    def test_connection_error_becomes_bot_service_error(self, lex_service, mock_lex_client):
        mock_lex_client.post_text.side_effect = EndpointConnectionError(endpoint_url="https://runtime.lex")

        with pytest.raises(BotServiceError):
            lex_service.send_text("hello", "widget-4")

    def test_builds_boto3_client_from_settings(self, test_settings):
        with patch("travelbot.services.lex_service.boto3.Session") as session_cls:
            service = LexService(test_settings)

        session_cls.assert_called_once_with(
            aws_access_key_id=test_settings.aws_access_key_id,
            aws_secret_access_key=test_settings.aws_secret_access_key,
            aws_session_token=test_settings.aws_session_token,
            region_name="us-east-1",
        )
        args, kwargs = session_cls.return_value.client.call_args
        assert args == ("lex-runtime",)
        assert kwargs["region_name"] == "us-east-1"
        assert service.client is session_cls.return_value.client.return_value
        assert service.bot_name == "BookTripMOBILEHUB"
