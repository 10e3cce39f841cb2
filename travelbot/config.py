import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

# Load environment variables from .env file
load_dotenv()


class Settings(BaseModel):
    aws_region: str = os.getenv("AWS_REGION", "us-east-1")
    debug: bool = os.getenv("DEBUG_LOGGING", "false").lower() == "true"

    aws_access_key_id: Optional[str] = os.getenv("AWS_ACCESS_KEY_ID")
    aws_secret_access_key: Optional[str] = os.getenv("AWS_SECRET_ACCESS_KEY")
    aws_session_token: Optional[str] = os.getenv("AWS_SESSION_TOKEN")

    # Bot registration, consumed once by the Lex client at startup
    lex_bot_name: str = os.getenv("LEX_BOT_NAME", "BookTripMOBILEHUB")
    lex_bot_alias: str = os.getenv("LEX_BOT_ALIAS", "$LATEST")
    lex_slot_prefix: str = os.getenv("LEX_SLOT_PREFIX", "BookTrip")
    bot_request_timeout: float = float(os.getenv("BOT_REQUEST_TIMEOUT", "10"))
    bot_max_attempts: int = int(os.getenv("BOT_MAX_ATTEMPTS", "2"))

    bot_display_name: str = os.getenv("BOT_DISPLAY_NAME", "AWS Chatbot")
    greeting: str = os.getenv("BOT_GREETING", "Hello, how can I help you today?")
    unreachable_message: str = os.getenv("BOT_UNREACHABLE_MESSAGE", "Sorry, I couldn't reach the assistant.")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
