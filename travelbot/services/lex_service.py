"""
Lex Service

This service handles the single outbound call of the widget: sending
an utterance to the BookTrip bot and returning its reply.
"""

from __future__ import annotations
import logging
import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..config import Settings
from ..exceptions import BotServiceError
from ..models.lex import BotResponse
from ..utils.debug_logger import debug_logger

logger = logging.getLogger(__name__)


class LexService:
    """Service for interacting with the Lex runtime"""

    def __init__(self, settings: Settings, client=None) -> None:
        """Initialize the Lex service from the bot configuration"""
        if client is None:
            session = boto3.Session(
                aws_access_key_id=settings.aws_access_key_id,
                aws_secret_access_key=settings.aws_secret_access_key,
                aws_session_token=settings.aws_session_token,
                region_name=settings.aws_region,
            )
            client_config = Config(
                connect_timeout=settings.bot_request_timeout,
                read_timeout=settings.bot_request_timeout,
                retries={"max_attempts": settings.bot_max_attempts, "mode": "standard"},
            )
            client = session.client("lex-runtime", region_name=settings.aws_region, config=client_config)
        self.client = client
        self.bot_name = settings.lex_bot_name
        self.bot_alias = settings.lex_bot_alias
        self.slot_prefix = settings.lex_slot_prefix

    def send(self, bot_name: str, utterance: str, user_id: str) -> BotResponse:
        """
        Send an utterance to a Lex bot

        Args:
            bot_name: Name of the registered bot
            utterance: User input text
            user_id: Identifier Lex uses to keep the dialog together

        Returns:
            BotResponse with reply text, dialog state, intent and slots

        Raises:
            BotServiceError: if the call fails
        """
        debug_logger.log_lex(user_id, f"Sending to {bot_name}: '{utterance[:50]}'")
        try:
            response = self.client.post_text(
                botName=bot_name,
                botAlias=self.bot_alias,
                userId=user_id,
                inputText=utterance,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Lex post_text failed for bot {bot_name}: {e}")
            raise BotServiceError(f"Bot service call failed: {e}", original_exception=e) from e

        logger.debug(f"Lex response: {response}")
        bot_response = BotResponse.from_lex(response, self.slot_prefix)
        debug_logger.log_lex(
            user_id,
            "Received reply",
            dialog_state=bot_response.dialog_state.value,
            intent=bot_response.intent_name,
        )
        return bot_response

    def send_text(self, utterance: str, user_id: str) -> BotResponse:
        """Send an utterance to the configured bot"""
        return self.send(self.bot_name, utterance, user_id)
