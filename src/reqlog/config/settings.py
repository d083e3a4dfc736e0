from pydantic_settings import BaseSettings
from pydantic import ConfigDict, field_validator
from pathlib import Path
from typing import Literal
from functools import lru_cache
from ..formatting.compiler import Format
from ..validators.config_validators import to_uppercase, to_lowercase, check_template

class Settings(BaseSettings):
    """
    Application settings loaded from environment.
    """

    # Environment
    ENV: Literal["development", "testing", "staging", "production"] = "development"

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "text"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("logs")
    LOG_MAX_BYTES: int = 10_000_000  # 10 MB
    LOG_BACKUP_COUNT: int = 5

    # Request logging
    # None -> "{method} {uri} -> {status} ({response-time} ms)"
    REQUEST_LOG_TEMPLATE: str | None = None
    REQUEST_LOG_LOGGER: str = "reqlog.access"

    # --- Derived settings ---
    @property
    def request_log_format(self) -> Format:
        """
        Return the compiled request log format.

        REQUEST_LOG_TEMPLATE was already compiled once by its validator, so this
        cannot raise for a Settings instance that exists. An unset template yields
        the default format; an empty one yields a format that renders "".
        """
        return Format.from_template(self.REQUEST_LOG_TEMPLATE)

    # --- Validators ---
    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str | None) -> str | None:
        """
        Normalize the LOG_LEVEL environment variable value to uppercase.

        Runs before the Literal check (mode="before") so `LOG_LEVEL=debug` is accepted.
        """
        return to_uppercase(v)

    @field_validator("LOG_FORMAT", mode="before")
    def normalize_log_format(cls, v: str | None) -> str | None:
        """
        Normalize the LOG_FORMAT environment variable value to lowercase.
        """
        return to_lowercase(v)

    @field_validator("REQUEST_LOG_TEMPLATE")
    def validate_request_log_template(cls, v: str | None) -> str | None:
        """
        Reject a malformed template while settings load, so the service refuses
        to start instead of failing on its first request.

        Raises:
            ValidationError: wrapping the UnknownFieldTokenError /
                             UnterminatedPlaceholderError raised by the compiler.
        """
        return check_template(v)

    # --- ConfigDict settings ---
    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

# get_settings() takes no arguments and always returns the same settings from the environment,
# so caching it with @lru_cache() avoids re-reading the environment and re-validating the template.
@lru_cache()
def get_settings() -> Settings:
    return Settings()
