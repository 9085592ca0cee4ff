"""Resolved configuration and the origin of each value."""

from collections.abc import Mapping
from typing import Literal, NamedTuple

from pydantic import ValidationError

from notion_typed.exceptions import ConfigurationError

from .schema import NotionSettings

ConfigOrigin = Literal["programmatic", "env", "default"]
SourceMap = Mapping[str, ConfigOrigin]

FIELD_ORDER = ("token", "root_url", "notion_version", "timeout_seconds")


class ResolvedConfig(NamedTuple):
    """Validated configuration plus where each field came from.

    The token is redacted from ``str`` and ``repr`` so a config can be logged.
    """

    token: str | None
    root_url: str
    notion_version: str
    timeout_seconds: float

    origin: SourceMap

    def __str__(self) -> str:
        token_display = "[REDACTED]" if self.token else None
        return (
            f"ResolvedConfig(token={token_display!r}, root_url={self.root_url!r}, "
            f"notion_version={self.notion_version!r}, "
            f"timeout_seconds={self.timeout_seconds!r}, "
            f"origin={dict(self.origin)!r})"
        )

    def __repr__(self) -> str:
        return self.__str__()

    def with_overrides(self, **overrides: object) -> "ResolvedConfig":
        """Copy with programmatic overrides applied; unknown fields are ignored.

        Raises:
            ConfigurationError: If the merged values fail validation.
        """
        values = {field: getattr(self, field) for field in FIELD_ORDER}
        origin = dict(self.origin)
        for field, value in overrides.items():
            if field in FIELD_ORDER:
                values[field] = value
                origin[field] = "programmatic"
        try:
            validated = NotionSettings(**values).to_dict()
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e
        return ResolvedConfig(**validated, origin=origin)

    def audit(self) -> str:
        """One line per field with its origin; the token value is never shown."""
        lines = []
        for field in FIELD_ORDER:
            source = self.origin.get(field, "default")
            if field == "token":
                shown = "[REDACTED]" if self.token else "None"
            else:
                shown = repr(getattr(self, field))
            lines.append(f"{field}: {shown} (from {source})")
        return "\n".join(lines)
