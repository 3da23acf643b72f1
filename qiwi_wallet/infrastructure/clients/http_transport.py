"""HTTP implementation of Transport."""

import time
from typing import Any, Mapping

import httpx
import structlog

from qiwi_wallet.core.config import settings
from qiwi_wallet.core.metrics import record_api_request, track_api_latency
from qiwi_wallet.domain.exceptions import TransportException
from qiwi_wallet.domain.interfaces import HttpMethod, Transport

logger = structlog.get_logger(__name__)


class HttpTransport(Transport):
    """
    httpx-backed transport for the wallet API.

    Sends one request per call with a JSON content type and, when a token
    is configured, bearer authorization. No retries.
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self._token = token
        self._base_url = (base_url or settings.api_url).rstrip("/")
        self._timeout = timeout or settings.api_timeout
        self._client = client

    @property
    def base_url(self) -> str:
        return self._base_url

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def call(
        self,
        endpoint: str,
        method: HttpMethod,
        params: Mapping[str, str],
        body: Any | None = None,
    ) -> str:
        """Send the request and return the response body as text."""
        verb = HttpMethod(method).value
        url = f"{self._base_url}/{endpoint.lstrip('/')}"

        log = logger.bind(method=verb, endpoint=endpoint)
        log.debug("wallet_request_started", params=dict(params))

        start_time = time.perf_counter()
        try:
            with track_api_latency(verb):
                response = await self._send(verb, url, params, body)
        except httpx.HTTPError as e:
            record_api_request(verb, "connection_error")
            log.warning("wallet_request_failed", error=str(e), error_type=type(e).__name__)
            raise TransportException(
                message=f"Request to {endpoint} failed: {e}",
            ) from e

        duration_ms = (time.perf_counter() - start_time) * 1000

        try:
            text = response.content.decode(response.encoding or "utf-8")
        except (UnicodeDecodeError, LookupError) as e:
            record_api_request(verb, "invalid_text")
            log.warning("wallet_response_not_text", status_code=response.status_code)
            raise TransportException(
                message=f"Response from {endpoint} is not valid text: {e}",
                status_code=response.status_code,
            ) from e

        log.debug("wallet_response_received", data=text)

        if not response.is_success:
            record_api_request(verb, "http_error")
            log.warning(
                "wallet_request_rejected",
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
                response=text[:200],
            )
            raise TransportException(
                message=f"Received HTTP {response.status_code} with data: {text}",
                status_code=response.status_code,
                body=text,
            )

        record_api_request(verb, "success")
        log.info(
            "wallet_request_completed",
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )
        return text

    async def _send(
        self,
        method: str,
        url: str,
        params: Mapping[str, str],
        body: Any | None,
    ) -> httpx.Response:
        kwargs: dict[str, Any] = {
            "params": dict(params),
            "headers": self._headers(),
        }
        if body is not None:
            kwargs["json"] = body

        if self._client is not None:
            return await self._client.request(method, url, **kwargs)

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.request(method, url, **kwargs)
