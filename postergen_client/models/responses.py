"""Backend response envelope models.

The poster backend wraps payloads in one of two shapes:

    { datapayload: { data: T }, alertify?: {...}, metadata?: ... }
    { listdatapayload: { data: T, pagination: {...} | null } }

Each operation validates against the envelope it expects; there is no generic
unwrap.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class DataPayload(BaseModel, Generic[T]):
    """Inner wrapper for single-value payloads."""

    data: T | None = None


class ListDataPayload(BaseModel, Generic[T]):
    """Inner wrapper for list payloads, with optional pagination metadata."""

    data: T | None = None
    pagination: dict[str, Any] | None = None


class DataEnvelope(BaseModel, Generic[T]):
    """Success envelope carrying ``datapayload``."""

    datapayload: DataPayload[T] | None = None
    alertify: dict[str, Any] | None = None
    metadata: Any = None


class ListDataEnvelope(BaseModel, Generic[T]):
    """Success envelope carrying ``listdatapayload``."""

    listdatapayload: ListDataPayload[T] | None = None
    alertify: dict[str, Any] | None = None
    metadata: Any = None
