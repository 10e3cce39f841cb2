"""
Exceptions for Travel Bot

Errors raised by the bot client and the conversation holder. The web layer
turns them into HTTP status codes.
"""

from typing import Optional


class TravelBotError(Exception):
    """Base exception class for all Travel Bot errors"""

    http_status: int = 500


class BotServiceError(TravelBotError):
    """The external bot service failed or could not be reached"""

    http_status = 502

    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.original_exception = original_exception


class SubmissionInProgressError(TravelBotError):
    """A message was submitted while the previous one is still awaiting a reply"""

    http_status = 409

    def __init__(self, message: str = "A message is already being sent"):
        super().__init__(message)
