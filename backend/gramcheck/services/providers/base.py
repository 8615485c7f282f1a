"""Shared behavior for grammar check provider adapters.

Every adapter builds a provider-specific request around the same
instruction prompt, performs one transport call, pulls the reply text
out of the provider's envelope and hands it to the normalizer. Transport
problems are translated into ``ProviderFailure`` kinds here so each
adapter only describes its wire format.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable

from gramcheck.config import settings
from gramcheck.core.errors import FailureKind, ProviderFailure
from gramcheck.core.normalizer import normalize
from gramcheck.models.grammar import CorrectionResult
from gramcheck.services.transport import (
    TransportError,
    TransportHTTPError,
    TransportTimeout,
    post_json,
)

logger = logging.getLogger(__name__)

Transport = Callable[..., Awaitable[Any]]


class GrammarProvider(ABC):
    """A remote text-completion service used as a grammar oracle."""

    name: str = "provider"
    label: str = "Provider"

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str,
        model: str,
        timeout: float | None = None,
        transport: Transport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout if timeout is not None else settings.provider_timeout_seconds
        self._transport = transport or post_json

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def check(self, text: str) -> CorrectionResult:
        """Check *text* and return the normalized result.

        Raises ProviderFailure on any failure to obtain a reply.
        """
        if not self.api_key:
            raise self._failure(FailureKind.missing_credentials, f"{self.label} API key not configured")

        url, payload, headers, params = self.build_request(text)
        logger.info("POST %s  provider=%s  model=%s  text_len=%d", url, self.name, self.model, len(text))

        try:
            body = await self._transport(
                url, payload, headers=headers, params=params, timeout=self.timeout,
            )
        except TransportTimeout as exc:
            raise self._failure(FailureKind.timeout, "Request timed out. Please try again.") from exc
        except TransportHTTPError as exc:
            raise self._http_failure(exc) from exc
        except TransportError as exc:
            raise self._failure(FailureKind.transport, f"Grammar check with {self.label} failed: {exc}") from exc

        reply = self.extract_reply(body)
        if not reply:
            raise self._failure(FailureKind.malformed, f"No response from {self.label} service")

        result = normalize(reply, text)
        logger.info("%s returned %d error(s)", self.label, len(result.errors))
        return result

    @abstractmethod
    def build_request(self, text: str) -> tuple[str, dict, dict[str, str], dict[str, str] | None]:
        """Return ``(url, payload, headers, query_params)`` for *text*."""

    @abstractmethod
    def extract_reply(self, body: object) -> str | None:
        """Pull the reply text out of the provider's response body."""

    def _http_failure(self, exc: TransportHTTPError) -> ProviderFailure:
        if exc.status_code == 429:
            return self._failure(
                FailureKind.rate_limited,
                f"{self.label} API rate limit exceeded. Please try again later.",
            )
        if exc.status_code == 401:
            return self._failure(FailureKind.unauthorized, f"Invalid {self.label} API key")
        return self._failure(FailureKind.transport, f"Grammar check with {self.label} failed: {exc}")

    def _failure(self, kind: FailureKind, message: str) -> ProviderFailure:
        logger.warning("%s failure (%s): %s", self.label, kind.value, message)
        return ProviderFailure(kind, message, provider=self.name)
