"""HTTP client for the poster-generation backend.

Fetches the template and logo catalogs, looks up single templates and stored
posters, and submits generation requests. Every operation issues exactly one
request, passes the response through the normalizer, then validates the
endpoint's envelope. No retries and no caching: each call is independent and
safe to run concurrently with others.

Template records carry ``required_fields`` and ``customization_data`` as JSON
text; both are decoded before the records are returned.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from postergen_client.config.settings import ClientSettings
from postergen_client.errors import UNKNOWN_NETWORK_ERROR_MESSAGE, FormatError, RequestError
from postergen_client.models.normalizer import (
    absolute_file_url,
    normalize_response,
    shape_template,
    unwrap_data,
    unwrap_list_data,
    validate_model,
)
from postergen_client.models.requests import GenerationRequest
from postergen_client.models.schemas import (
    GeneratedPoster,
    GenerationResult,
    Logo,
    PosterRecord,
    Template,
)

logger = logging.getLogger(__name__)

TEMPLATE_FORMAT_ERROR = "Template data from the API is not in the expected format."
LOGO_FORMAT_ERROR = "Logo data from the API is not in the expected format."
POSTER_FORMAT_ERROR = "Poster data from the API is not in the expected format."
PDF_URL_MISSING_ERROR = "PDF URL not found in the server response."


class PosterClient:
    """Async client for the poster backend API.

    Parameters
    ----------
    settings:
        Backend origins and HTTP timeout. Defaults to ``ClientSettings()``,
        which reads ``POSTERGEN_*`` environment variables.
    http_client:
        Optional long-lived ``httpx.AsyncClient``. Its lifecycle stays with the
        caller. When omitted, each request opens and closes its own client.
    transport:
        Optional ``httpx`` transport for per-request clients (e.g.
        ``httpx.MockTransport`` in tests). Ignored when ``http_client`` is set.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._api_base_url = self._settings.api_base_url
        self._file_server_base_url = self._settings.file_server_base_url
        self._http_client = http_client
        self._transport = transport

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    async def fetch_templates(self) -> list[Template]:
        """Fetch all active templates, in server order.

        Raises
        ------
        RequestError
            Transport failure or non-2xx status.
        FormatError
            ``listdatapayload.data`` is not a list, or a record is malformed.
        json.JSONDecodeError
            The body or an embedded template field is not valid JSON.
        """
        body = await self._request("GET", "/posters/templates")
        records = unwrap_list_data(body, TEMPLATE_FORMAT_ERROR)
        return [shape_template(record, TEMPLATE_FORMAT_ERROR) for record in records]

    async def fetch_template(self, template_id: int) -> Template:
        """Fetch a single template by id."""
        body = await self._request("GET", f"/posters/templates/{template_id}")
        record = unwrap_data(body, dict[str, Any], TEMPLATE_FORMAT_ERROR)
        return shape_template(record, TEMPLATE_FORMAT_ERROR)

    async def fetch_logos(self) -> list[Logo]:
        """Fetch the predefined logo library. Records are returned as-is."""
        body = await self._request("GET", "/logos")
        return unwrap_data(body, list[Any], LOGO_FORMAT_ERROR)

    async def generate_poster(
        self,
        template_id: int,
        business_name: str,
        data: dict[str, Any],
        customization_data: dict[str, Any],
    ) -> GenerationResult:
        """Generate a poster and return an absolute link to its PDF.

        Parameters
        ----------
        template_id:
            Template to render, sent as the ``template_id`` query parameter.
        business_name:
            Business name printed on the poster.
        data:
            Values for the template's dynamic fields, e.g. ``{"till_number": "123"}``.
        customization_data:
            Styling overrides, e.g. ``{"primary_color": "#ff0000"}``.

        Raises
        ------
        RequestError
            Transport failure or non-2xx status.
        FormatError
            The response carries no usable ``datapayload.data.pdf_url``.
        """
        request = GenerationRequest(
            template_id=template_id,
            business_name=business_name,
            data=data,
            customization_data=customization_data,
        )
        body = await self._request(
            "POST",
            "/posters/generate",
            params={"template_id": request.template_id},
            json=request.body(),
        )

        poster = unwrap_data(body, GeneratedPoster, PDF_URL_MISSING_ERROR)
        pdf_url = poster.pdf_url
        if not isinstance(pdf_url, str) or pdf_url == "":
            logger.warning("Generation response has no pdf_url for template_id=%s", template_id)
            raise FormatError(PDF_URL_MISSING_ERROR)

        return GenerationResult(pdf_url=absolute_file_url(self._file_server_base_url, pdf_url))

    async def fetch_poster(self, poster_id: int) -> PosterRecord:
        """Fetch a stored poster; a relative ``pdf_url`` is made absolute."""
        body = await self._request("GET", f"/posters/{poster_id}")
        record = unwrap_data(body, dict[str, Any], POSTER_FORMAT_ERROR)
        poster = validate_model(PosterRecord, record, POSTER_FORMAT_ERROR)

        if poster.pdf_url is not None and poster.pdf_url != "":
            poster.pdf_url = absolute_file_url(self._file_server_base_url, poster.pdf_url)
        return poster

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send one request and return the normalized JSON body."""
        url = f"{self._api_base_url}{path}"
        logger.debug("%s %s", method, url, extra={"method": method, "url": url})
        started = time.monotonic()

        try:
            if self._http_client is not None:
                response = await self._send(self._http_client, method, url, **kwargs)
            else:
                async with httpx.AsyncClient(transport=self._transport) as client:
                    response = await self._send(client, method, url, **kwargs)
        except httpx.RequestError as exc:
            logger.warning(
                "Request to poster service failed for %s %s: %s",
                method,
                url,
                exc,
                extra={"method": method, "url": url},
            )
            raise RequestError(UNKNOWN_NETWORK_ERROR_MESSAGE, url=url) from exc

        duration_ms = (time.monotonic() - started) * 1000
        logger.debug(
            "%s %s -> %d in %.1fms",
            method,
            url,
            response.status_code,
            duration_ms,
            extra={
                "method": method,
                "url": url,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 1),
            },
        )

        try:
            return normalize_response(response)
        except RequestError as exc:
            logger.warning(
                "Poster service returned status %d for %s %s: %s",
                response.status_code,
                method,
                url,
                exc.message,
                extra={"method": method, "url": url, "status_code": response.status_code},
            )
            raise

    async def _send(
        self, client: httpx.AsyncClient, method: str, url: str, **kwargs: Any
    ) -> httpx.Response:
        if method == "POST":
            return await client.post(url, timeout=self._settings.timeout_seconds, **kwargs)
        return await client.get(url, timeout=self._settings.timeout_seconds, **kwargs)
