"""Response builders and hypothesis strategies shared by unit and property tests."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
from hypothesis import strategies as st

from postergen_client.config.settings import ClientSettings
from postergen_client.integration.poster_client import PosterClient

API_BASE_URL = "http://localhost:8081/api"
FILE_SERVER_BASE_URL = "http://localhost:8081"


# ---------------------------------------------------------------------------
# Response helpers
# ---------------------------------------------------------------------------

def make_response(
    status_code: int,
    json_body: Any = None,
    content: bytes | None = None,
    method: str = "GET",
) -> httpx.Response:
    """Build an ``httpx.Response`` with either a JSON body or raw content."""
    request = httpx.Request(method, "https://example.com")
    if content is not None:
        return httpx.Response(status_code, content=content, request=request)
    return httpx.Response(
        status_code,
        content=json.dumps(json_body).encode("utf-8"),
        headers={"Content-Type": "application/json"},
        request=request,
    )


def mock_transport_client(
    handler: Callable[[httpx.Request], httpx.Response],
) -> PosterClient:
    """PosterClient whose per-request clients go through ``httpx.MockTransport``."""
    return PosterClient(
        ClientSettings(api_base_url=API_BASE_URL, file_server_base_url=FILE_SERVER_BASE_URL),
        transport=httpx.MockTransport(handler),
    )


def list_envelope(data: Any) -> dict:
    return {"listdatapayload": {"data": data, "pagination": None}}


def data_envelope(data: Any) -> dict:
    return {"datapayload": {"data": data}}


# ---------------------------------------------------------------------------
# Hypothesis strategies (reusable across property tests)
# ---------------------------------------------------------------------------

# JSON leaf values and small nested documents
json_leaves = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-10_000, max_value=10_000),
    st.text(max_size=20),
)
json_values = st.recursive(
    json_leaves,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(st.text(max_size=8), children, max_size=4),
    ),
    max_leaves=10,
)

# Error statuses the backend can answer with
error_statuses = st.sampled_from([400, 401, 403, 404, 409, 422, 500, 502, 503])

# Non-empty server error messages
error_messages = st.text(min_size=1, max_size=60)

# Field descriptors as the backend stores them inside required_fields
field_descriptors = st.fixed_dictionaries(
    {
        "name": st.from_regex(r"[a-z_]{1,12}", fullmatch=True),
        "label": st.text(min_size=1, max_size=20),
        "type": st.sampled_from(["text", "tel", "number", "select"]),
    },
    optional={"maxLength": st.integers(min_value=1, max_value=100)},
)

# Styling defaults as stored inside customization_data
customizations = st.dictionaries(
    keys=st.sampled_from(["primary_color", "secondary_color", "font", "logo_url"]),
    values=st.text(max_size=12),
    max_size=4,
)

# Server-relative artifact paths
relative_paths = st.from_regex(r"[a-z0-9_]{1,10}(/[a-z0-9_]{1,10}){0,3}\.pdf", fullmatch=True)
