"""Local pattern-based checker used when no provider is configured."""

import re
from dataclasses import dataclass

from gramcheck.models.grammar import CorrectionResult, ErrorKind, TextError

HEURISTIC_CONFIDENCE = 0.85


@dataclass(frozen=True)
class HeuristicRule:
    pattern: re.Pattern
    kind: ErrorKind
    suggestions: tuple[str, ...]


def _rule(pattern: str, kind: ErrorKind, *suggestions: str) -> HeuristicRule:
    return HeuristicRule(re.compile(pattern, re.IGNORECASE), kind, suggestions)


# Order matters: the rule index is part of every error id.
RULES: tuple[HeuristicRule, ...] = (
    _rule(r"\bteh\b", ErrorKind.spelling, "the"),
    _rule(r"\brecieve\b", ErrorKind.spelling, "receive"),
    _rule(r"\btheir\b(?=\s+(?:is|are|was|were)\b)", ErrorKind.grammar, "there"),
    _rule(r"\byour\b(?=\s+(?:welcome|right)\b)", ErrorKind.grammar, "you're"),
    _rule(r"\bdefinately\b", ErrorKind.spelling, "definitely"),
    _rule(r"\bseperate\b", ErrorKind.spelling, "separate"),
    _rule(r"\boccured\b", ErrorKind.spelling, "occurred"),
    _rule(r"\buntill\b", ErrorKind.spelling, "until"),
    _rule(r"\balot\b", ErrorKind.spelling, "a lot"),
    _rule(r"\bcould of\b", ErrorKind.grammar, "could have"),
    _rule(r"\bvery unique\b", ErrorKind.style, "unique"),
    _rule(r"[ \t]+,", ErrorKind.punctuation, ","),
)

_MESSAGE_LABELS = {
    ErrorKind.spelling: "Possible spelling mistake",
    ErrorKind.grammar: "Grammar issue detected",
    ErrorKind.punctuation: "Punctuation issue detected",
    ErrorKind.style: "Style suggestion",
}


def check_heuristic(text: str, rules: tuple[HeuristicRule, ...] = RULES) -> CorrectionResult:
    """Scan *text* with every rule and build a result without any remote call.

    Rules are applied independently; matches from different rules may
    overlap and are all reported.
    """
    errors: list[TextError] = []
    for rule_index, rule in enumerate(rules):
        for match in rule.pattern.finditer(text):
            errors.append(
                TextError(
                    id=f"mock-error-{rule_index}-{match.start()}",
                    kind=rule.kind,
                    start=match.start(),
                    end=match.end(),
                    context=match.group(0),
                    message=f'{_MESSAGE_LABELS[rule.kind]}: "{match.group(0)}"',
                    suggestions=rule.suggestions,
                )
            )

    return CorrectionResult(
        errors=tuple(errors),
        corrected_text=_apply_first_suggestions(text, errors),
        confidence=HEURISTIC_CONFIDENCE,
    )


def _apply_first_suggestions(text: str, errors: list[TextError]) -> str:
    # Highest offset first so each splice leaves lower offsets valid.
    # Overlapping matches are spliced as-is.
    corrected = text
    for error in sorted(errors, key=lambda e: e.start, reverse=True):
        if error.suggestions:
            corrected = corrected[: error.start] + error.suggestions[0] + corrected[error.end :]
    return corrected
