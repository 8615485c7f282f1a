"""Grammar check and health endpoints."""

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from gramcheck.config import settings
from gramcheck.core.grammar_orchestrator import GrammarCheckConfig, check_text
from gramcheck.middleware.rate_limiter import CHECK_LIMIT, limiter
from gramcheck.models.grammar import CorrectionResult, GrammarCheckRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/grammar-check")
@limiter.limit(CHECK_LIMIT)
async def grammar_check_endpoint(request: Request, body: GrammarCheckRequest) -> dict:
    """Check text with the configured providers.

    TextTooLong and ProviderFailure propagate to the app's exception
    handlers (400 and 500 respectively).
    """
    text = body.text or ""
    if not text.strip():
        return CorrectionResult(errors=(), corrected_text=text).to_wire()

    start = time.perf_counter()
    result = await check_text(text, GrammarCheckConfig.from_settings(settings))
    logger.info(
        "Grammar check done: %d chars, %d errors, %.1f ms",
        len(text), len(result.errors), (time.perf_counter() - start) * 1000,
    )
    return result.to_wire()


@router.get("/health")
@limiter.limit(CHECK_LIMIT)
async def health_check(request: Request) -> dict:
    """Report which provider credentials are configured."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": {
            "openai": bool(settings.openai_api_key),
            "gemini": bool(settings.gemini_api_key),
        },
    }
