"""
Runtime configuration for the resume chat service.

Values come from the environment (optionally a .env file in the working
directory). Override any of them per deployment:

    PARSED_DIR                   directory for parsed resume JSON (default: parsed)
    MAX_FILE_SIZE                upload size limit in bytes (default: 10 MB)
    CONVERSATION_HISTORY_LIMIT   exchanges kept per chat session (default: 10)
    LOG_LEVEL                    root log level (default: INFO)
"""

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_HISTORY_LIMIT = 10


class Settings(BaseModel):
    parsed_dir: Path = Path("parsed")
    max_file_size: int = Field(default=DEFAULT_MAX_FILE_SIZE, gt=0)
    conversation_history_limit: int = Field(default=DEFAULT_HISTORY_LIMIT, gt=0)
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    return Settings(
        parsed_dir=Path(os.getenv("PARSED_DIR", "parsed")),
        max_file_size=int(os.getenv("MAX_FILE_SIZE", DEFAULT_MAX_FILE_SIZE)),
        conversation_history_limit=int(os.getenv("CONVERSATION_HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT)),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
