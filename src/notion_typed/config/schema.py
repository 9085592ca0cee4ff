"""Configuration schema and validation using Pydantic.

Validates and coerces configuration values from the environment or from
programmatic overrides, with the defaults for talking to the public API.
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from notion_typed.constants import API_ROOT_URL, API_VERSION, NETWORK_TIMEOUT


class NotionSettings(BaseSettings):
    """Pydantic settings schema for the Notion client.

    Environment variables use the ``NOTION_`` prefix, e.g. ``NOTION_TOKEN``.
    """

    model_config = SettingsConfigDict(
        env_prefix="NOTION_",
        env_file=None,
        case_sensitive=False,
        extra="ignore",
    )

    token: str | None = Field(
        default=None,
        description="Integration token sent as a bearer credential",
    )

    root_url: str = Field(
        default=API_ROOT_URL,
        description="Base URL every request path is appended to",
        min_length=1,
    )

    notion_version: str = Field(
        default=API_VERSION,
        description="Value of the Notion-Version header",
        min_length=1,
    )

    timeout_seconds: float = Field(
        default=NETWORK_TIMEOUT,
        description="Per-request network timeout in seconds",
        gt=0,
    )

    @field_validator("root_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths start with '/', so the root must not end with one."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"root_url must be an http(s) URL, got {v!r}")
        return v.rstrip("/")

    def to_dict(self) -> dict[str, Any]:
        return {
            "token": self.token,
            "root_url": self.root_url,
            "notion_version": self.notion_version,
            "timeout_seconds": self.timeout_seconds,
        }
