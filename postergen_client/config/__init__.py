"""Configuration: client settings and environment profiles."""

from postergen_client.config.environments import EnvironmentProfile, load_environment_profiles
from postergen_client.config.settings import ClientSettings

__all__ = [
    "ClientSettings",
    "EnvironmentProfile",
    "load_environment_profiles",
]
