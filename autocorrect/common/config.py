import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


class SettingsError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    dictionary_path: str = "big.txt"
    suggestion_limit: int = 10
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.suggestion_limit < 1:
            raise SettingsError(f"suggestion limit must be positive, got {self.suggestion_limit}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise SettingsError(f"unknown log level: {self.log_level!r}")


def load_settings() -> Settings:
    raw_limit = os.getenv("AUTOCORRECT_SUGGESTION_LIMIT", "10")
    try:
        suggestion_limit = int(raw_limit)
    except ValueError as exc:
        raise SettingsError(f"AUTOCORRECT_SUGGESTION_LIMIT must be an integer, got {raw_limit!r}") from exc

    return Settings(
        dictionary_path=os.getenv("AUTOCORRECT_DICTIONARY_PATH", "big.txt"),
        suggestion_limit=suggestion_limit,
        log_level=os.getenv("AUTOCORRECT_LOG_LEVEL", "INFO").upper(),
    )
