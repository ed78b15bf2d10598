"""Shared test fixtures for the poster client test suite."""

from __future__ import annotations

import os

import pytest

from postergen_client.config.settings import ClientSettings
from postergen_client.integration.poster_client import PosterClient
from support import API_BASE_URL, FILE_SERVER_BASE_URL


# ---------------------------------------------------------------------------
# Keep POSTERGEN_* variables from the outer environment out of the tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_client_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("POSTERGEN_"):
            monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# Settings and client fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(
        api_base_url=API_BASE_URL,
        file_server_base_url=FILE_SERVER_BASE_URL,
    )


@pytest.fixture
def client(settings: ClientSettings) -> PosterClient:
    return PosterClient(settings)
