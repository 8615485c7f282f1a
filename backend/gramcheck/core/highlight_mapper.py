"""Split text into plain and error spans for display."""

from typing import Sequence

from gramcheck.models.grammar import HighlightSpan, SpanKind, TextError


def partition(text: str, errors: Sequence[TextError]) -> list[HighlightSpan]:
    """Partition *text* into ordered, non-overlapping spans.

    Each error is re-anchored by searching for its ``context`` at or after
    the cursor. Errors whose context was already consumed by an earlier
    match are skipped. Joining the span texts always gives back *text*.
    """
    eligible = [e for e in errors if e.context and e.context in text]
    eligible.sort(key=lambda e: e.start)  # stable: ties keep input order

    spans: list[HighlightSpan] = []
    cursor = 0
    for error in eligible:
        index = text.find(error.context, cursor)
        if index == -1:
            continue
        if index > cursor:
            spans.append(HighlightSpan(kind=SpanKind.plain, text=text[cursor:index]))
        end = index + len(error.context)
        spans.append(HighlightSpan(kind=SpanKind.error, text=text[index:end], error=error))
        cursor = end

    if cursor < len(text):
        spans.append(HighlightSpan(kind=SpanKind.plain, text=text[cursor:]))
    return spans
