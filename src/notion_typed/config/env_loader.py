"""Environment variable configuration loading.

Reads the ``NOTION_*`` variables that are actually set, leaving defaults to
the resolver, and validates them through the settings schema.
"""

import os
from typing import Any

from pydantic import ValidationError

from .schema import NotionSettings

ENV_VARS = {
    "NOTION_TOKEN": "token",
    "NOTION_ROOT_URL": "root_url",
    "NOTION_NOTION_VERSION": "notion_version",
    "NOTION_TIMEOUT_SECONDS": "timeout_seconds",
}


class EnvironmentConfigLoader:
    """Loads configuration from ``NOTION_*`` environment variables."""

    def load_env_config(self) -> dict[str, Any]:
        """Return only the fields set in the environment, validated.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        raw = {
            field: os.environ[env_var]
            for env_var, field in ENV_VARS.items()
            if env_var in os.environ
        }
        if not raw:
            return {}

        try:
            settings = NotionSettings(**raw)
        except ValidationError as e:
            names = ", ".join(
                env_var for env_var, field in ENV_VARS.items() if field in raw
            )
            raise ValueError(f"Invalid environment variable values ({names}): {e}") from e

        return {field: getattr(settings, field) for field in raw}

    def get_env_summary(self) -> dict[str, str]:
        """Set ``NOTION_*`` variables with the token redacted."""
        summary = {}
        for env_var in ENV_VARS:
            if env_var in os.environ:
                if env_var == "NOTION_TOKEN":
                    summary[env_var] = "<redacted>"
                else:
                    summary[env_var] = os.environ[env_var]
        return summary
