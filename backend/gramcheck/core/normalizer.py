"""Coerce raw provider replies into a strict CorrectionResult.

Provider output is free text from a generative model. Every field is
defaulted independently so one bad field never discards an otherwise
usable result. Only a double parse failure falls back to the empty result.
"""

import logging

from gramcheck.models.grammar import CorrectionResult, ErrorKind, TextError
from gramcheck.utils.json_parser import parse_json_object_from_llm_response

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER_CONFIDENCE = 0.8
DEFAULT_ERROR_MESSAGE = "Grammar issue detected"


def empty_result(original_text: str) -> CorrectionResult:
    """Result used when the reply cannot be parsed at all."""
    return CorrectionResult(errors=(), corrected_text=original_text, confidence=None)


def normalize(raw_reply: str, original_text: str) -> CorrectionResult:
    """Turn *raw_reply* into a validated result for *original_text*. Never raises."""
    try:
        parsed = parse_json_object_from_llm_response(raw_reply)
        if parsed is None:
            return empty_result(original_text)
        return _build_result(parsed, original_text)
    except Exception:
        logger.error("Unexpected failure normalizing provider reply", exc_info=True)
        return empty_result(original_text)


def _build_result(parsed: dict, original_text: str) -> CorrectionResult:
    raw_errors = parsed.get("errors")
    if not isinstance(raw_errors, list):
        raw_errors = []

    errors: list[TextError] = []
    seen_ids: set[str] = set()
    dropped = 0
    for index, item in enumerate(raw_errors):
        if not isinstance(item, dict):
            dropped += 1
            continue
        error = _build_error(item, index, original_text)
        if error.context not in original_text:
            dropped += 1
            continue
        if error.id in seen_ids:
            error = error.model_copy(update={"id": _unique_id(f"error-{index}", seen_ids)})
        seen_ids.add(error.id)
        errors.append(error)

    if dropped:
        logger.info("Dropped %d of %d provider errors that did not anchor to the text", dropped, len(raw_errors))

    corrected_text = parsed.get("correctedText")
    if not isinstance(corrected_text, str) or not corrected_text:
        corrected_text = original_text

    return CorrectionResult(
        errors=tuple(errors),
        corrected_text=corrected_text,
        confidence=_coerce_confidence(parsed.get("confidence")),
    )


def _build_error(item: dict, index: int, original_text: str) -> TextError:
    text_len = len(original_text)
    start = min(max(_coerce_offset(item.get("start")), 0), text_len)
    end = min(max(_coerce_offset(item.get("end")), start), text_len)

    context = item.get("context")
    if not isinstance(context, str) or not context:
        context = original_text[start:end]

    error_id = item.get("id")
    if isinstance(error_id, (int, float)) and not isinstance(error_id, bool):
        error_id = str(error_id)
    if not isinstance(error_id, str) or not error_id:
        error_id = f"error-{index}"

    message = item.get("message")
    if not isinstance(message, str) or not message:
        message = DEFAULT_ERROR_MESSAGE

    suggestions = item.get("suggestions")
    if isinstance(suggestions, str):
        suggestions = [suggestions]
    if not isinstance(suggestions, list):
        suggestions = []

    return TextError(
        id=error_id,
        kind=ErrorKind.coerce(item.get("type", item.get("kind"))),
        start=start,
        end=end,
        context=context,
        message=message,
        suggestions=tuple(s for s in suggestions if isinstance(s, str)),
    )


def _unique_id(candidate: str, seen_ids: set[str]) -> str:
    suffix = 1
    unique = candidate
    while unique in seen_ids:
        unique = f"{candidate}-{suffix}"
        suffix += 1
    return unique


def _coerce_offset(value: object) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value == value and abs(value) != float("inf"):
        return int(value)
    return 0


def _coerce_confidence(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_PROVIDER_CONFIDENCE
    if value != value:  # NaN
        return DEFAULT_PROVIDER_CONFIDENCE
    return min(max(float(value), 0.0), 1.0)
