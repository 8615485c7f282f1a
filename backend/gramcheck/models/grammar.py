"""Grammar check request/response models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ErrorKind(str, Enum):
    """Category of a reported issue."""

    grammar = "grammar"
    spelling = "spelling"
    punctuation = "punctuation"
    style = "style"

    @classmethod
    def coerce(cls, value: object) -> "ErrorKind":
        """Map any provider value onto a known kind, defaulting to grammar."""
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.grammar


class TextError(BaseModel):
    """One issue reported against a text snapshot.

    ``context`` is the authoritative locator; ``start``/``end`` are hints
    that go stale as soon as the text is edited.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    kind: ErrorKind = Field(default=ErrorKind.grammar, alias="type")
    start: int = 0
    end: int = 0
    context: str = ""
    message: str = ""
    suggestions: tuple[str, ...] = ()

    @field_validator("kind", mode="before")
    @classmethod
    def _coerce_kind(cls, value: object) -> ErrorKind:
        return ErrorKind.coerce(value)


class CorrectionResult(BaseModel):
    """Output of a single check, scoped to the text that produced it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    errors: tuple[TextError, ...] = ()
    corrected_text: str = Field(default="", alias="correctedText")
    confidence: float | None = None

    def to_wire(self) -> dict:
        """Serialize using the JSON field names clients expect."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SpanKind(str, Enum):
    plain = "plain"
    error = "error"


class HighlightSpan(BaseModel):
    """A contiguous slice of text, optionally tied to an error."""

    model_config = ConfigDict(frozen=True)

    kind: SpanKind
    text: str
    error: TextError | None = None


class GrammarCheckRequest(BaseModel):
    """Request body for ``POST /api/grammar-check``."""

    text: str | None = None
