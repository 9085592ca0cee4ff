"""Configuration for the Notion typed client.

Resolve once, then pass the frozen result around:

    config = resolve_config({"token": "secret_..."})
    client = NotionClient(config=config)
"""

from typing import Any

from .audit import SourceTracker, generate_telemetry_summary
from .env_loader import EnvironmentConfigLoader
from .resolver import ConfigResolver
from .schema import NotionSettings
from .types import ConfigOrigin, ResolvedConfig, SourceMap

_resolver = ConfigResolver()


def resolve_config(programmatic: dict[str, Any] | None = None) -> ResolvedConfig:
    """Resolve configuration: Programmatic > Environment > Defaults.

    Raises:
        ConfigurationError: If any source holds an invalid value.
    """
    return _resolver.resolve(programmatic)


__all__ = [
    "ConfigOrigin",
    "ConfigResolver",
    "EnvironmentConfigLoader",
    "NotionSettings",
    "ResolvedConfig",
    "SourceMap",
    "SourceTracker",
    "generate_telemetry_summary",
    "resolve_config",
]
