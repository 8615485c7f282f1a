"""Per-session usage counters.

The grammar core only ever *notifies* an ``EventRecorder``; it never reads
session state back. ``SessionMetrics.record`` is one such recorder.
"""

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Callable

logger = logging.getLogger(__name__)

EventRecorder = Callable[[str, dict], None]

CHECK_STARTED = "grammar_check_started"
CHECK_COMPLETED = "grammar_check_completed"
CHECK_FAILED = "grammar_check_failed"
SUGGESTION_APPLIED = "suggestion_applied"


def _new_session_id() -> str:
    return f"session_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


@dataclass
class SessionMetrics:
    """Running totals for one user session."""

    session_id: str = field(default_factory=_new_session_id)
    started_at: float = field(default_factory=time.time)
    text_checks: int = 0
    failed_checks: int = 0
    errors_found: int = 0
    suggestions_applied: int = 0
    total_characters_checked: int = 0

    def record(self, event_name: str, properties: dict) -> None:
        """Update counters for a known event; unknown events are only logged."""
        logger.debug("Session %s event %s %s", self.session_id, event_name, properties)

        if event_name == CHECK_STARTED:
            self.text_checks += 1
            text_length = properties.get("text_length")
            if isinstance(text_length, int):
                self.total_characters_checked += text_length
        elif event_name == CHECK_COMPLETED:
            errors_found = properties.get("errors_found")
            if isinstance(errors_found, int):
                self.errors_found += errors_found
        elif event_name == CHECK_FAILED:
            self.failed_checks += 1
        elif event_name == SUGGESTION_APPLIED:
            self.suggestions_applied += 1


def notify(record_event: EventRecorder | None, event_name: str, **properties: object) -> None:
    """Send an event to *record_event*; a broken recorder never breaks a check."""
    if record_event is None:
        return
    try:
        record_event(event_name, properties)
    except Exception:
        logger.warning("Event recorder failed for %s", event_name, exc_info=True)
