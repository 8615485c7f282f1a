"""Outbound JSON transport for provider calls."""

import logging

import httpx

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """Raised when a provider request cannot be completed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TransportTimeout(TransportError):
    """Raised when a provider request exceeds its timeout."""


class TransportHTTPError(TransportError):
    """Raised when a provider answers with a non-2xx status."""


async def post_json(
    url: str,
    payload: dict,
    *,
    headers: dict[str, str] | None = None,
    params: dict[str, str] | None = None,
    timeout: float = 30.0,
) -> object:
    """POST *payload* as JSON and return the decoded body.

    A body that is not valid JSON is returned as text. A single request is
    made; there are no retries.
    """
    request_headers = {"Content-Type": "application/json"}
    if headers:
        request_headers.update(headers)

    try:
        async with httpx.AsyncClient(timeout=httpx.Timeout(timeout, connect=10.0)) as client:
            response = await client.post(url, headers=request_headers, params=params, json=payload)
            logger.info("Provider response status: %d", response.status_code)
            if response.status_code >= 400:
                logger.error("Provider error body: %s", response.text[:500])
            response.raise_for_status()
    except httpx.TimeoutException as exc:
        raise TransportTimeout(f"Request timed out after {timeout:g}s") from exc
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        raise TransportHTTPError(f"HTTP {status}", status_code=status) from exc
    except httpx.HTTPError as exc:
        raise TransportError(str(exc) or exc.__class__.__name__) from exc

    try:
        return response.json()
    except ValueError:
        return response.text
