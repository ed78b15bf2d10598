"""Response normalization and envelope unwrapping.

Turns raw ``httpx.Response`` objects into JSON values, maps non-2xx responses
to RequestError, and validates each endpoint's envelope shape, raising
FormatError on mismatch. Handles:
- Error message resolution from the error body's ``message`` field
- Envelope unwrapping for ``datapayload`` and ``listdatapayload`` shapes
- Decoding of JSON text embedded in template records
- Rewriting relative artifact paths into absolute file-server links
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from postergen_client.errors import (
    SERVER_ERROR_MESSAGE,
    UNKNOWN_NETWORK_ERROR_MESSAGE,
    FormatError,
    RequestError,
)
from postergen_client.models.responses import DataEnvelope, ListDataEnvelope
from postergen_client.models.schemas import Template

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Sentinel for an error body that could not be decoded
_UNDECODABLE = object()


def resolve_error_message(body: Any) -> str:
    """Pick the user-facing message for a non-2xx response body.

    A non-empty string ``message`` is used as-is. A truthy number or boolean is
    rendered as JSON text (``404`` becomes ``"404"``). Anything else, including
    objects and arrays, falls back to the generic server message.
    """
    if body is _UNDECODABLE:
        return UNKNOWN_NETWORK_ERROR_MESSAGE
    message = body.get("message") if isinstance(body, dict) else None
    if isinstance(message, str) and message:
        return message
    if isinstance(message, (bool, int, float)) and message:
        return json.dumps(message)
    return SERVER_ERROR_MESSAGE


def normalize_response(response: httpx.Response) -> Any:
    """Return the decoded JSON body of a 2xx response.

    Raises
    ------
    RequestError
        If the status is not 2xx.
    json.JSONDecodeError
        If a 2xx body is not valid JSON.
    """
    if response.is_success:
        return response.json()

    try:
        body = response.json()
    except ValueError:
        body = _UNDECODABLE

    raise RequestError(
        resolve_error_message(body),
        status_code=response.status_code,
        body=None if body is _UNDECODABLE else body,
    )


def _shape_error(error_message: str, reason: str) -> FormatError:
    logger.warning("Unexpected response shape (%s): %s", reason, error_message)
    return FormatError(error_message)


def unwrap_data(body: Any, data_type: Any, error_message: str) -> Any:
    """Validate ``datapayload.data`` against ``data_type`` and return it.

    A missing envelope key or a ``null`` payload counts as a shape violation.
    """
    try:
        envelope = DataEnvelope[data_type].model_validate(body)
    except ValidationError as exc:
        raise _shape_error(error_message, f"{exc.error_count()} validation errors") from exc
    if envelope.datapayload is None or envelope.datapayload.data is None:
        raise _shape_error(error_message, "datapayload.data missing")
    return envelope.datapayload.data


def unwrap_list_data(body: Any, error_message: str) -> list[Any]:
    """Return ``listdatapayload.data``, which must be a JSON array."""
    try:
        envelope = ListDataEnvelope[list[Any]].model_validate(body)
    except ValidationError as exc:
        raise _shape_error(error_message, f"{exc.error_count()} validation errors") from exc
    if envelope.listdatapayload is None or envelope.listdatapayload.data is None:
        raise _shape_error(error_message, "listdatapayload.data missing")
    return envelope.listdatapayload.data


def decode_embedded(value: Any, default: Callable[[], T]) -> Any:
    """Decode JSON text stored inside a record field.

    Only a non-empty string is decoded; anything else yields ``default()``.
    Decode failures propagate as ``json.JSONDecodeError``.
    """
    if isinstance(value, str) and value != "":
        return json.loads(value)
    return default()


def shape_template(record: Any, error_message: str) -> Template:
    """Build a Template from a raw record, decoding its embedded fields."""
    if not isinstance(record, dict):
        raise _shape_error(error_message, "template record is not an object")

    fields = dict(record)
    fields["required_fields"] = decode_embedded(record.get("required_fields"), list)
    fields["customization_data"] = decode_embedded(record.get("customization_data"), dict)

    return validate_model(Template, fields, error_message)


def validate_model(model: type[BaseModel], data: Any, error_message: str) -> Any:
    """Validate ``data`` into ``model``, mapping failures to FormatError."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise _shape_error(error_message, f"invalid {model.__name__}") from exc


def absolute_file_url(file_server_base_url: str, relative_path: str) -> str:
    """Prefix a server-relative artifact path with the file server origin."""
    return f"{file_server_base_url}/{relative_path}"
