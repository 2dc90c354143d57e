"""
Configuration settings for the Word Scramble Discord Bot.
Loads environment variables and defines constants.
"""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent

# Shortest word a player may submit
MIN_WORD_LENGTH = 3


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Discord Bot Token
    discord_token: Optional[str] = Field(default=None, validation_alias="DISCORD_TOKEN")

    # Database (dictionary lookup cache)
    database_url: str = Field(
        default="sqlite+aiosqlite:///word_scramble_bot.db",
        validation_alias="DATABASE_URL"
    )

    # Root words, one per line
    word_list_path: Path = Field(
        default=BASE_DIR / "data" / "start.txt",
        validation_alias="WORD_LIST_PATH"
    )

    # Game Settings
    min_word_length: int = Field(default=MIN_WORD_LENGTH, validation_alias="MIN_WORD_LENGTH")

    # Dictionary Settings
    dictionary_language: str = Field(default="en", validation_alias="DICTIONARY_LANGUAGE")
    dictionary_backend: str = Field(default="api", validation_alias="DICTIONARY_BACKEND")  # "api" or "wordset"
    dictionary_api_url: str = Field(
        default="https://api.dictionaryapi.dev/api/v2/entries",
        validation_alias="DICTIONARY_API_URL"
    )
    dictionary_file: Optional[Path] = Field(default=None, validation_alias="DICTIONARY_FILE")

    # Cache settings
    word_cache_expiry_days: int = Field(default=30, validation_alias="WORD_CACHE_EXPIRY_DAYS")

    # Development mode
    dev_mode: bool = Field(default=False, validation_alias="DEV_MODE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


# Global settings instance
SETTINGS = Settings()

# Dictionary backends
class DictionaryBackend:
    API = "api"
    WORDSET = "wordset"

# Logger names
LOGGER_NAME_MAIN = "__main__"
LOGGER_NAME_GAME = "__game__"
LOGGER_NAME_DICTIONARY = "__dictionary__"
LOGGER_NAME_DB = "__database__"

# Rejection titles and messages shown to the player
TITLE_WORD_USED = "Word used already"
MESSAGE_WORD_USED = "Be more original"
TITLE_WORD_IMPOSSIBLE = "Word not possible"
MESSAGE_WORD_IMPOSSIBLE = "You can't spell that word from '{root_word}'!"
TITLE_WORD_UNRECOGNIZED = "Word not recognized"
MESSAGE_WORD_UNRECOGNIZED = "You can't just make them up, you know!"
TITLE_WORD_TOO_SHORT = "Word too short"
MESSAGE_WORD_TOO_SHORT = "You can't enter a word with less than {min_length} letters!"
TITLE_WORD_SAME = "Word is same"
MESSAGE_WORD_SAME = "You can't use the question word as an answer!"

DEFAULT_LANGUAGE = "en"
