"""Error hierarchy for the poster service client.

All client-specific errors extend PosterClientError. Two failure families are
surfaced to callers:

- RequestError: the backend could not be reached, or answered with a non-2xx
  status. The message comes from the error body's ``message`` field or a fixed
  fallback.
- FormatError: the backend answered with valid JSON that does not match the
  expected envelope shape for the operation.

Malformed JSON is not part of this hierarchy; ``json.JSONDecodeError``
propagates to the caller unchanged.
"""

from __future__ import annotations

from typing import Any

# Fallback messages for non-2xx responses
UNKNOWN_NETWORK_ERROR_MESSAGE = "An unknown network error occurred."
SERVER_ERROR_MESSAGE = "The server returned an error."


class PosterClientError(Exception):
    """Base error for all poster client errors."""

    message: str = "Poster service request failed"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class RequestError(PosterClientError):
    """Transport failure or non-2xx HTTP status from the backend.

    ``status_code`` is None when the request never produced a response.
    ``body`` holds the decoded error body when it was valid JSON.
    """

    message = SERVER_ERROR_MESSAGE

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        body: Any = None,
        **kwargs: object,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.body = body


class FormatError(PosterClientError):
    """Response JSON does not match the expected envelope shape."""

    message = "The server response is not in the expected format."
