"""Async client for the poster-generation backend."""

from postergen_client.config.settings import ClientSettings
from postergen_client.errors import FormatError, PosterClientError, RequestError
from postergen_client.integration.poster_client import PosterClient
from postergen_client.models.schemas import GenerationResult, PosterRecord, Template

__all__ = [
    "ClientSettings",
    "FormatError",
    "GenerationResult",
    "PosterClient",
    "PosterClientError",
    "PosterRecord",
    "RequestError",
    "Template",
]
