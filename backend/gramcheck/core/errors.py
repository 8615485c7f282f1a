"""Grammar check exceptions."""

from enum import Enum


class FailureKind(str, Enum):
    missing_credentials = "missing_credentials"
    rate_limited = "rate_limited"
    unauthorized = "unauthorized"
    timeout = "timeout"
    transport = "transport"
    malformed = "malformed"


class GrammarCheckError(Exception):
    """Base exception for grammar check operations."""

    pass


class ProviderFailure(GrammarCheckError):
    """Raised by a provider adapter when a check cannot be completed."""

    def __init__(self, kind: FailureKind, message: str, provider: str = ""):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.provider = provider

    def __repr__(self) -> str:
        return f"ProviderFailure(kind={self.kind.value!r}, provider={self.provider!r}, message={self.message!r})"


class TextTooLong(GrammarCheckError):
    """Raised when the submitted text exceeds the configured maximum."""

    def __init__(self, length: int, max_length: int):
        super().__init__(f"Text too long. Maximum {max_length:,} characters.")
        self.length = length
        self.max_length = max_length
