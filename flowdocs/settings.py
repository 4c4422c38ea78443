import os
from datetime import timedelta
from typing import Literal

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from flowdocs import __version__

load_dotenv()

LogLevel = Literal["debug", "info", "warn", "error"]


class Settings(BaseModel):
    # Logging Configuration
    log_level: LogLevel = Field(default="info", alias="LOG_LEVEL")

    # Server metadata
    server_name: str = "react-flow-mcp-server"
    version: str = __version__

    # Resilience Configuration (fixed, not read from the environment)
    breaker_failure_threshold: int = 5
    breaker_reset_timeout: timedelta = timedelta(seconds=60)
    cache_max_size: int = 500

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().lower()
            if value == "warning":
                return "warn"
        return value

    @classmethod
    def from_env(cls) -> "Settings":
        raw = os.getenv("LOG_LEVEL", "info")
        try:
            return cls.model_validate({"LOG_LEVEL": raw})
        except ValidationError:
            # Called at import time; an invalid value falls back to the default.
            logger.warning(f"Invalid LOG_LEVEL {raw!r}, falling back to info")
            return cls()


global_settings = Settings.from_env()
