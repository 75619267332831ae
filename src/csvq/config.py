"""Application settings loaded from the environment and ``.env``."""
from __future__ import annotations

from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    OPENAI_API_KEY: SecretStr | None = None
    OPENAI_MODEL_AGENT: str = "gpt-4o"
    QUESTION_AGENT_NAME: str = "csvQuestionAgent"

    HTTP_TIMEOUT: float = 30.0
    LOG_LEVEL: LogLevel = "INFO"

    # Output-size heuristics.
    MIN_GENERATED_CHARS: int = 20
    MIN_QUESTION_CHARS: int = 5
    MAX_QUESTIONS: int = 10
    SAMPLE_ROW_LIMIT: int = 10

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value


settings = Settings()
