"""Client for the ``/api/grammar-check`` endpoint.

HTTP-layer failures are translated into one typed, user-facing error per
category. The caller's own text/error state is never touched here, so a
failed check leaves whatever the editor already shows intact.
"""

import logging

import httpx

from gramcheck.config import settings
from gramcheck.models.grammar import CorrectionResult

logger = logging.getLogger(__name__)


class GrammarServiceError(Exception):
    """Base error for grammar service calls; the message is user-facing."""


class RateLimitExceeded(GrammarServiceError):
    pass


class ServiceUnavailable(GrammarServiceError):
    pass


class RequestTimedOut(GrammarServiceError):
    pass


class ServiceUnreachable(GrammarServiceError):
    pass


async def check_grammar(
    text: str,
    base_url: str | None = None,
    *,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CorrectionResult:
    """POST *text* to the grammar service and return the parsed result."""
    if not text or not text.strip():
        return CorrectionResult(errors=(), corrected_text=text)

    url = f"{(base_url or settings.api_base_url).rstrip('/')}/api/grammar-check"
    client_timeout = timeout if timeout is not None else settings.client_timeout_seconds

    try:
        async with httpx.AsyncClient(timeout=client_timeout, transport=transport) as client:
            response = await client.post(url, json={"text": text})
            response.raise_for_status()
            return CorrectionResult.model_validate(response.json())
    except httpx.TimeoutException as exc:
        raise RequestTimedOut("Request timed out. Please try again.") from exc
    except httpx.ConnectError as exc:
        raise ServiceUnreachable(
            "Unable to connect to grammar service. Please ensure the API server is running."
        ) from exc
    except httpx.HTTPStatusError as exc:
        raise _status_error(exc.response) from exc
    except httpx.HTTPError as exc:
        raise GrammarServiceError(str(exc) or "Grammar check failed") from exc
    except ValueError as exc:
        logger.error("Grammar service returned an unreadable body", exc_info=True)
        raise GrammarServiceError("Grammar check failed") from exc


def _status_error(response: httpx.Response) -> GrammarServiceError:
    body = _json_body(response)
    message = body.get("error") if isinstance(body.get("error"), str) else None

    if response.status_code == 429:
        return RateLimitExceeded("Rate limit exceeded. Please try again later.")
    if response.status_code == 500 and body.get("fallback"):
        return ServiceUnavailable(message or "Service temporarily unavailable")
    return GrammarServiceError(message or f"Grammar check failed (HTTP {response.status_code})")


def _json_body(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
