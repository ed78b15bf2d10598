"""Backend integration: the poster service HTTP client."""

from postergen_client.integration.poster_client import PosterClient

__all__ = ["PosterClient"]
