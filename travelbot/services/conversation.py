"""
Conversation Service

Holds the widget's conversation: the message feed, the text in the
input box and the confirmation banner. Submitting sends the input to
the bot and records the reply.
"""

import asyncio
import logging
import uuid
from typing import Optional

from ..config import Settings
from ..exceptions import BotServiceError, SubmissionInProgressError
from ..models.chat import ConversationState, Message, Role, TurnResult
from ..utils.debug_logger import debug_logger
from .interpreter import interpret

logger = logging.getLogger(__name__)


class Conversation:
    """State holder for a single chat session"""

    def __init__(self, bot, settings: Settings):
        """
        Args:
            bot: Bot client exposing send_text(utterance, user_id)
            settings: Application settings
        """
        self.bot = bot
        self.settings = settings
        self._in_flight = False
        self.reset()

    def reset(self) -> None:
        """Start over with only the greeting"""
        self._new_bot_session()
        self.pending_input = ""
        self.confirmation_banner: Optional[str] = None
        self.messages = [self._bot_message(self.settings.greeting)]

    def _new_bot_session(self) -> None:
        # Lex keeps dialog state per userId
        self.user_id = f"widget-{uuid.uuid4()}"

    @property
    def busy(self) -> bool:
        return self._in_flight

    def set_input(self, text: str) -> None:
        self.pending_input = text

    def snapshot(self) -> ConversationState:
        return ConversationState(
            pending_input=self.pending_input,
            messages=[message.model_copy() for message in self.messages],
            confirmation_banner=self.confirmation_banner,
        )

    async def submit(self) -> Optional[TurnResult]:
        """
        Send the pending input to the bot

        The user message is visible in the feed while the bot call is
        outstanding. Failures to reach the bot end up as a bot message.

        Returns:
            TurnResult for the round trip, or None if there was no input

        Raises:
            SubmissionInProgressError: if a previous submit has not finished
        """
        if self._in_flight:
            raise SubmissionInProgressError()

        text = self.pending_input
        if not text:
            return None

        self._in_flight = True
        try:
            user_message = Message(id=Role.USER, text=text)
            self.messages = [*self.messages, user_message]
            self.pending_input = ""
            debug_logger.log_chat(self.user_id, f"Submitting '{text[:50]}{'...' if len(text) > 50 else ''}'")

            try:
                response = await asyncio.wait_for(
                    asyncio.to_thread(self.bot.send_text, text, self.user_id),
                    timeout=self.settings.bot_request_timeout,
                )
            except asyncio.TimeoutError:
                logger.error(f"Bot did not answer within {self.settings.bot_request_timeout}s")
                # The abandoned call may still reach Lex; continue on a fresh dialog
                self._new_bot_session()
                return self._record_failure(user_message)
            except BotServiceError as e:
                logger.error(f"Bot service failure: {e}")
                return self._record_failure(user_message)
            except Exception:
                logger.exception("Unexpected error while calling the bot")
                return self._record_failure(user_message)

            bot_message = self._bot_message(response.reply_text)
            self.messages = [*self.messages, bot_message]

            confirmation = interpret(response)
            if confirmation is not None:
                self.confirmation_banner = confirmation.text
                debug_logger.log_chat(self.user_id, f"Confirmation: {confirmation.text}")

            return TurnResult(
                user_message=user_message,
                bot_message=bot_message,
                confirmation=confirmation,
            )
        finally:
            self._in_flight = False

    def _record_failure(self, user_message: Message) -> TurnResult:
        bot_message = self._bot_message(self.settings.unreachable_message)
        self.messages = [*self.messages, bot_message]
        return TurnResult(user_message=user_message, bot_message=bot_message, delivered=False)

    def _bot_message(self, text: str) -> Message:
        return Message(id=Role.BOT, text=text, name=self.settings.bot_display_name)
