"""Environment profile models and YAML loader.

A profile names a pair of backend origins (API and file server) so the client
can be pointed at different deployments without editing environment
variables. Profiles are read from a YAML file shaped like::

    environments:
      local:
        api_base_url: http://localhost:8081/api
        file_server_base_url: http://localhost:8081
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class EnvironmentProfile(BaseModel):
    """Backend origins for one deployment."""

    api_base_url: str = Field(..., min_length=1)
    file_server_base_url: str = Field(..., min_length=1)


def load_environment_profiles(yaml_path: str) -> dict[str, EnvironmentProfile]:
    """Parse an environments YAML file into typed EnvironmentProfile objects.

    Args:
        yaml_path: Path to the YAML configuration file.

    Returns:
        A dict mapping profile names to EnvironmentProfile instances. A missing
        file, unparsable YAML or a missing ``environments`` key yields an empty
        dict; invalid individual profiles are skipped.
    """
    path = Path(yaml_path)

    if not path.exists():
        logger.warning("Environment profiles file not found at %s", yaml_path)
        return {}

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        logger.error("Failed to parse environment profiles YAML at %s: %s", yaml_path, exc)
        return {}

    if not isinstance(raw, dict) or not isinstance(raw.get("environments"), dict):
        logger.warning("Environment profiles YAML missing 'environments' mapping")
        return {}

    profiles: dict[str, EnvironmentProfile] = {}
    for name, config in raw["environments"].items():
        try:
            profiles[str(name)] = EnvironmentProfile.model_validate(config)
        except ValidationError as exc:
            logger.error("Invalid environment profile '%s': %s, skipping", name, exc)

    return profiles
