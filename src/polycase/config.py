"""Polycase configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


ExceptionMatch = Literal["message", "full"]


class PolycaseSettings(BaseSettings):
    """Library-wide settings.

    Loads from environment variables automatically:
        POLYCASE_EXCEPTION_MATCH, POLYCASE_VERBOSITY
    """

    exception_match: ExceptionMatch = Field(
        default="message",
        description=(
            "How Assert.throws compares exceptions: 'message' compares type and str(), "
            "'full' also compares args and instance attributes"
        ),
    )
    verbosity: int = Field(default=0, description="Default verbosity of the standalone runner")

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="POLYCASE_",
    )


@lru_cache(maxsize=1)
def get_settings() -> PolycaseSettings:
    return PolycaseSettings()
