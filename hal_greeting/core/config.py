# hal_greeting/core/config.py

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    HOST: str = "127.0.0.1"
    PORT: int = 8080

    GREETING_TEMPLATE: str = "Hello, %s!"
    DEFAULT_NAME: str = "World"
    # first id handed out by the counter
    COUNTER_SEED: int = 1

    LOG_LEVEL: str = "INFO"

    class Config:
        """
        Values come from HAL_GREETING_* environment variables, then from a
        .env file in the working directory.
        """
        env_prefix = "HAL_GREETING_"
        env_file = ".env"

    @field_validator("GREETING_TEMPLATE")
    @classmethod
    def _one_placeholder(cls, value: str) -> str:
        try:
            value % ("x",)
        except (TypeError, ValueError):
            raise ValueError("template must take exactly one %s argument")
        return value

    @field_validator("DEFAULT_NAME")
    @classmethod
    def _non_empty_name(cls, value: str) -> str:
        if not value:
            raise ValueError("default name must not be empty")
        return value

    @field_validator("COUNTER_SEED")
    @classmethod
    def _positive_seed(cls, value: int) -> int:
        if value < 1:
            raise ValueError("counter seed must be >= 1")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level