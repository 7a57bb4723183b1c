"""
Thin httpx transport for the CFTools data API.
"""

import time
from typing import Any, Dict, Optional, TYPE_CHECKING

import httpx

from shared.logging import get_logger
from shared.errors import (
    AuthenticationError,
    DuplicateResourceCreation,
    ExternalServiceError,
    RateLimitError,
    ResourceNotFound,
)

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector

SERVICE_NAME = "cftools"


class CFToolsHttp:
    """Sends requests and maps failures onto the shared error types."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        *,
        metrics: Optional["MetricsCollector"] = None,
    ):
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self.metrics = metrics
        self.logger = get_logger("cftools.http")

    async def request(
        self,
        method: str,
        path: str,
        *,
        endpoint: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Send a request and return the decoded JSON body, or None when empty."""
        url = f"{self.base_url}{path}"
        endpoint = endpoint or path
        start = time.perf_counter()

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(method, url, params=params, json=json, headers=headers)
        except httpx.HTTPError as exc:
            self.logger.error("CFTools request failed", method=method, endpoint=endpoint, error=str(exc))
            raise ExternalServiceError(
                service=SERVICE_NAME,
                message=str(exc),
                details={"method": method, "endpoint": endpoint},
            )

        if self.metrics:
            self.metrics.record_http_request(method, endpoint, response.status_code, time.perf_counter() - start)

        return self._handle_response(method, endpoint, response)

    def _handle_response(self, method: str, endpoint: str, response: httpx.Response) -> Any:
        status = response.status_code
        if 200 <= status < 300:
            if status == 204 or not response.content:
                return None
            return response.json()

        details = {"status_code": status, "endpoint": endpoint, "body": response.text}
        if status in (401, 403):
            raise AuthenticationError(f"CFTools rejected the request: {status}", details=details)
        if status == 404:
            self.logger.info("CFTools resource not found", method=method, endpoint=endpoint)
            raise ResourceNotFound(details=details)
        if status == 409:
            raise DuplicateResourceCreation(details=details)
        if status == 429:
            raise RateLimitError(details=details)

        self.logger.error(
            "CFTools request returned an error",
            method=method,
            endpoint=endpoint,
            status_code=status,
            response=response.text,
        )
        raise ExternalServiceError(
            service=SERVICE_NAME,
            message=f"Unexpected status {status}",
            details=details,
        )
