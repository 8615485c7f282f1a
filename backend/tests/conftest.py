"""Shared test fixtures for the grammar checker backend tests."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from gramcheck.core.errors import FailureKind, ProviderFailure
from gramcheck.main import app
from gramcheck.middleware.rate_limiter import limiter
from gramcheck.models.grammar import CorrectionResult, TextError


@pytest.fixture(autouse=True)
def _disable_rate_limit():
    """Endpoint tests make many requests; rate limiting is tested explicitly."""
    limiter.enabled = False
    yield
    limiter.enabled = False
    limiter.reset()


@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class FakeProvider:
    """Stand-in for a provider adapter that records its calls."""

    def __init__(self, name: str, result: CorrectionResult | None = None, failure: ProviderFailure | None = None):
        self.name = name
        self.result = result
        self.failure = failure
        self.calls: list[str] = []

    async def check(self, text: str) -> CorrectionResult:
        self.calls.append(text)
        if self.failure is not None:
            raise self.failure
        return self.result or CorrectionResult(errors=(), corrected_text=text, confidence=0.8)


@pytest.fixture
def make_provider():
    def _make(name: str = "fake", result=None, failure_kind: FailureKind | None = None):
        failure = None
        if failure_kind is not None:
            failure = ProviderFailure(failure_kind, f"{name} failed: {failure_kind.value}", provider=name)
        return FakeProvider(name, result=result, failure=failure)

    return _make


@pytest.fixture
def sample_errors() -> list[TextError]:
    return [
        TextError(id="e1", kind="spelling", start=2, end=9, context="recieve", suggestions=("receive",)),
        TextError(id="e2", kind="spelling", start=10, end=13, context="teh", suggestions=("the",)),
    ]
