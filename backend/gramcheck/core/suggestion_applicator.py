"""Apply an accepted suggestion to the current text."""

from dataclasses import dataclass
from typing import Sequence

from gramcheck.core.session_metrics import SUGGESTION_APPLIED, EventRecorder, notify
from gramcheck.models.grammar import TextError


@dataclass(frozen=True)
class AppliedSuggestion:
    new_text: str
    new_errors: Sequence[TextError]


def apply_suggestion(
    text: str,
    errors: Sequence[TextError],
    error_id: str,
    suggestion: str,
    record_event: EventRecorder | None = None,
) -> AppliedSuggestion:
    """Replace the target error's context with *suggestion*.

    The error is located by ``context`` rather than its stored offsets,
    which may be stale after edits. An unknown *error_id* is a silent no-op:
    the UI can race a stale click against a text edit. The remaining errors
    are not re-validated against the new text.
    """
    target = next((e for e in errors if e.id == error_id), None)
    if target is None:
        return AppliedSuggestion(new_text=text, new_errors=errors)

    new_text = text
    if target.context and target.context in text:
        new_text = text.replace(target.context, suggestion, 1)

    remaining = [e for e in errors if e is not target]
    notify(record_event, SUGGESTION_APPLIED, error_id=error_id, kind=target.kind.value)
    return AppliedSuggestion(new_text=new_text, new_errors=remaining)
