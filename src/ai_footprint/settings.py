"""Environment-backed settings primitives for :mod:`ai_footprint`."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["FootprintSettings", "get_settings"]

DEFAULT_GREEN_CHECK_URL = "https://api.thegreenwebfoundation.org/api/v3/greencheck"


class FootprintSettings(BaseSettings):
    """Expose environment-derived configuration knobs for the calculator.

    All environment access goes through this class. Malformed numeric values
    fall back to the inline default instead of failing start-up.

    Attributes:
        reference_dir: Directory holding ``foundation_models.json``,
            ``datacenters.json`` and ``devices.json`` overrides. Files missing
            from the directory fall back to the packaged tables.
        green_check_url: Base URL of the Green Web Foundation greencheck API.
        green_check_timeout: Timeout in seconds for greencheck requests.
        green_check_ttl_seconds: Cache lifetime for greencheck answers.
        log_level: Root log level used by the CLI.
        log_format: ``"text"`` for human-readable logs, ``"json"`` for
            structured records.
    """

    reference_dir: str | None = Field(
        default=None, alias="AI_FOOTPRINT_REFERENCE_DIR"
    )
    green_check_url: str = Field(
        default=DEFAULT_GREEN_CHECK_URL, alias="AI_FOOTPRINT_GREEN_CHECK_URL"
    )
    green_check_timeout: float = Field(
        default=8.0, alias="AI_FOOTPRINT_GREEN_CHECK_TIMEOUT"
    )
    green_check_ttl_seconds: int = Field(
        default=3600, alias="AI_FOOTPRINT_GREEN_CHECK_TTL"
    )
    log_level: str = Field(default="WARNING", alias="AI_FOOTPRINT_LOG_LEVEL")
    log_format: Literal["text", "json"] = Field(
        default="text", alias="AI_FOOTPRINT_LOG_FORMAT"
    )

    model_config = SettingsConfigDict(
        env_file=None, extra="ignore", populate_by_name=True
    )

    @field_validator("green_check_timeout", mode="before")
    @classmethod
    def _parse_timeout(cls, value: object) -> float:
        """Parse the timeout while tolerating malformed input.

        Args:
            value: Raw environment value.

        Returns:
            Parsed positive float, otherwise the 8 second default.
        """

        if isinstance(value, (int, float)) and not isinstance(value, bool):
            parsed = float(value)
        elif isinstance(value, str):
            try:
                parsed = float(value.strip())
            except ValueError:
                return 8.0
        else:
            return 8.0
        return parsed if parsed > 0 else 8.0

    @field_validator("green_check_ttl_seconds", mode="before")
    @classmethod
    def _parse_ttl(cls, value: object) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            return max(value, 0)
        if isinstance(value, str):
            try:
                return max(int(value.strip()), 0)
            except ValueError:
                return 3600
        return 3600

    @field_validator("log_format", mode="before")
    @classmethod
    def _normalise_log_format(cls, value: object) -> str:
        if isinstance(value, str) and value.strip().lower() == "json":
            return "json"
        return "text"

    @field_validator("reference_dir", mode="before")
    @classmethod
    def _blank_as_none(cls, value: object) -> str | None:
        if value in (None, ""):
            return None
        return str(value)


def get_settings() -> FootprintSettings:
    """Return a :class:`FootprintSettings` instance.

    Returns:
        Settings parsed from environment variables.
    """

    return FootprintSettings()
