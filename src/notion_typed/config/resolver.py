"""Configuration resolution with precedence handling.

Precedence, highest first: Programmatic > Environment > Defaults.
"""

from typing import Any

from pydantic import ValidationError

from notion_typed.exceptions import ConfigurationError

from .audit import SourceTracker
from .env_loader import EnvironmentConfigLoader
from .schema import NotionSettings
from .types import ResolvedConfig


class ConfigResolver:
    """Merges configuration sources and records the origin of every field."""

    def __init__(self) -> None:
        self.env_loader = EnvironmentConfigLoader()

    def resolve(self, programmatic: dict[str, Any] | None = None) -> ResolvedConfig:
        """Resolve configuration from all sources.

        Args:
            programmatic: Overrides with the highest precedence. Unknown keys
                are ignored.

        Raises:
            ConfigurationError: If the environment or the merged values fail
                validation.
        """
        tracker = SourceTracker()
        merged: dict[str, Any] = {}

        # Step 1: schema defaults (without reading the environment)
        for field, info in NotionSettings.model_fields.items():
            merged[field] = info.get_default(call_default_factory=True)
            tracker.set_origin(field, "default")

        # Step 2: environment
        try:
            env_config = self.env_loader.load_env_config()
        except ValueError as e:
            raise ConfigurationError(f"Environment configuration error: {e}") from e
        merged.update(env_config)
        tracker.set_multiple(env_config, "env")

        # Step 3: programmatic overrides
        if programmatic:
            known = {k: v for k, v in programmatic.items() if k in merged}
            merged.update(known)
            tracker.set_multiple(known, "programmatic")

        try:
            final = NotionSettings(**merged).to_dict()
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

        return ResolvedConfig(**final, origin=tracker.get_source_map())
