"""Provider selection and single-fallback grammar check orchestration.

Selection order: primary provider, else secondary provider, else the
local heuristic checker. When both providers are configured and the
primary fails for a reason the secondary does not share (timeout or
transport trouble), the secondary is tried exactly once. If that also
fails the primary's failure is raised.
"""

import logging
from dataclasses import dataclass

from gramcheck.config import Settings, settings
from gramcheck.core.errors import FailureKind, ProviderFailure, TextTooLong
from gramcheck.core.heuristic_checker import check_heuristic
from gramcheck.core.session_metrics import (
    CHECK_COMPLETED,
    CHECK_FAILED,
    CHECK_STARTED,
    EventRecorder,
    notify,
)
from gramcheck.models.grammar import CorrectionResult
from gramcheck.services.providers.base import GrammarProvider
from gramcheck.services.providers.gemini_provider import GeminiProvider
from gramcheck.services.providers.openai_provider import OpenAIProvider

logger = logging.getLogger(__name__)

# Failure kinds that say nothing about the secondary provider.
FALLBACK_KINDS = frozenset({FailureKind.timeout, FailureKind.transport})

HEURISTIC = "heuristic"


@dataclass(frozen=True)
class GrammarCheckConfig:
    """Immutable provider slots and limits for a check."""

    primary: GrammarProvider | None = None
    secondary: GrammarProvider | None = None
    max_text_length: int = 50_000

    @classmethod
    def from_settings(cls, cfg: Settings | None = None) -> "GrammarCheckConfig":
        """Fill each slot only when its credentials are configured."""
        if cfg is None:
            cfg = settings
        primary = secondary = None
        if cfg.openai_api_key:
            primary = OpenAIProvider(
                cfg.openai_api_key,
                base_url=cfg.openai_base_url,
                model=cfg.openai_model,
                timeout=cfg.provider_timeout_seconds,
            )
        if cfg.gemini_api_key:
            secondary = GeminiProvider(
                cfg.gemini_api_key,
                base_url=cfg.gemini_base_url,
                model=cfg.gemini_model,
                timeout=cfg.provider_timeout_seconds,
            )
        return cls(primary=primary, secondary=secondary, max_text_length=cfg.max_text_length)


def select_attempts(config: GrammarCheckConfig) -> list[GrammarProvider | str]:
    """Return the ordered attempts for *config*.

    The list holds at most two entries: the first choice, and the fallback
    that a qualifying first-choice failure may trigger.
    """
    if config.primary is not None and config.secondary is not None:
        return [config.primary, config.secondary]
    if config.primary is not None:
        return [config.primary]
    if config.secondary is not None:
        return [config.secondary]
    return [HEURISTIC]


async def check_text(
    text: str,
    config: GrammarCheckConfig | None = None,
    record_event: EventRecorder | None = None,
) -> CorrectionResult:
    """Run a grammar check on *text*.

    Raises TextTooLong before any provider call when the text is over the
    limit, and ProviderFailure when every attempt fails.
    """
    if config is None:
        config = GrammarCheckConfig.from_settings()

    if not text or not text.strip():
        return CorrectionResult(errors=(), corrected_text=text)

    if len(text) > config.max_text_length:
        raise TextTooLong(len(text), config.max_text_length)

    notify(record_event, CHECK_STARTED, text_length=len(text))

    first, *rest = select_attempts(config)
    try:
        result, used = await _run_attempt(first, text), first
    except ProviderFailure as exc:
        if not rest or exc.kind not in FALLBACK_KINDS:
            notify(record_event, CHECK_FAILED, provider=exc.provider, kind=exc.kind.value)
            raise
        fallback = rest[0]
        logger.warning("Primary provider failed (%s), retrying once with %s", exc.kind.value, _name(fallback))
        try:
            result, used = await _run_attempt(fallback, text), fallback
        except ProviderFailure as fallback_exc:
            logger.error("Fallback provider failed too (%s), raising primary failure", fallback_exc.kind.value)
            notify(record_event, CHECK_FAILED, provider=exc.provider, kind=exc.kind.value)
            raise exc

    notify(record_event, CHECK_COMPLETED, provider=_name(used), errors_found=len(result.errors))
    return result


async def _run_attempt(attempt: GrammarProvider | str, text: str) -> CorrectionResult:
    if isinstance(attempt, str):
        logger.warning("No provider API keys configured, using heuristic grammar checker")
        return check_heuristic(text)
    return await attempt.check(text)


def _name(attempt: GrammarProvider | str) -> str:
    return attempt if isinstance(attempt, str) else attempt.name
