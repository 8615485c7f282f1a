"""Tests for the grammar service client."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from httpx import ASGITransport

from gramcheck.core.errors import FailureKind, ProviderFailure
from gramcheck.main import app
from gramcheck.models.grammar import ErrorKind
from gramcheck.services.grammar_client import (
    GrammarServiceError,
    RateLimitExceeded,
    RequestTimedOut,
    ServiceUnavailable,
    ServiceUnreachable,
    check_grammar,
)


def _mock_transport(handler):
    return httpx.MockTransport(handler)


@pytest.mark.asyncio
class TestCheckGrammar:
    async def test_empty_text_makes_no_request(self):
        def _handler(request):
            raise AssertionError("no request expected")

        result = await check_grammar("   ", transport=_mock_transport(_handler))
        assert result.errors == ()
        assert result.corrected_text == "   "

    @patch("gramcheck.api.routes.grammar.settings")
    async def test_round_trip_against_app(self, mock_settings):
        mock_settings.openai_api_key = ""
        mock_settings.gemini_api_key = ""
        mock_settings.max_text_length = 50_000

        result = await check_grammar(
            "I recieve teh package",
            base_url="http://test",
            transport=ASGITransport(app=app),
        )

        assert result.corrected_text == "I receive the package"
        assert {e.kind for e in result.errors} == {ErrorKind.spelling}
        assert result.confidence == 0.85

    async def test_posts_to_grammar_endpoint(self):
        seen = {}

        def _handler(request):
            seen["url"] = str(request.url)
            seen["body"] = request.content
            return httpx.Response(200, json={"errors": [], "correctedText": "ok"})

        result = await check_grammar("ok", base_url="http://svc/", transport=_mock_transport(_handler))
        assert seen["url"] == "http://svc/api/grammar-check"
        assert b'"text"' in seen["body"]
        assert result.corrected_text == "ok"

    async def test_429_is_rate_limit(self):
        transport = _mock_transport(lambda r: httpx.Response(429, json={"error": "slow down"}))
        with pytest.raises(RateLimitExceeded, match="Rate limit exceeded"):
            await check_grammar("text", base_url="http://svc", transport=transport)

    async def test_500_with_fallback_surfaces_server_message(self):
        transport = _mock_transport(
            lambda r: httpx.Response(500, json={"error": "Invalid OpenAI API key", "fallback": True})
        )
        with pytest.raises(ServiceUnavailable, match="Invalid OpenAI API key"):
            await check_grammar("text", base_url="http://svc", transport=transport)

    @patch("gramcheck.api.routes.grammar.check_text", new_callable=AsyncMock)
    async def test_500_from_app(self, mock_check):
        mock_check.side_effect = ProviderFailure(FailureKind.timeout, "Request timed out. Please try again.")
        with pytest.raises(ServiceUnavailable, match="timed out"):
            await check_grammar("text", base_url="http://test", transport=ASGITransport(app=app))

    async def test_400_uses_error_field(self):
        transport = _mock_transport(
            lambda r: httpx.Response(400, json={"error": "Text too long. Maximum 50,000 characters."})
        )
        with pytest.raises(GrammarServiceError, match="Text too long") as info:
            await check_grammar("text", base_url="http://svc", transport=transport)
        assert type(info.value) is GrammarServiceError

    async def test_500_without_fallback_is_generic(self):
        transport = _mock_transport(lambda r: httpx.Response(500, text="oops"))
        with pytest.raises(GrammarServiceError) as info:
            await check_grammar("text", base_url="http://svc", transport=transport)
        assert not isinstance(info.value, ServiceUnavailable)

    async def test_timeout(self):
        def _handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(RequestTimedOut, match="timed out"):
            await check_grammar("text", base_url="http://svc", transport=_mock_transport(_handler))

    async def test_connection_failure(self):
        def _handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(ServiceUnreachable, match="Unable to connect"):
            await check_grammar("text", base_url="http://svc", transport=_mock_transport(_handler))

    async def test_unreadable_body(self):
        transport = _mock_transport(lambda r: httpx.Response(200, text="<html>"))
        with pytest.raises(GrammarServiceError):
            await check_grammar("text", base_url="http://svc", transport=transport)
