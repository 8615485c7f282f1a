"""Generative-content provider adapter."""

from gramcheck.config import settings
from gramcheck.core.prompt_builder import build_generative_contents
from gramcheck.services.providers.base import GrammarProvider, Transport


class GeminiProvider(GrammarProvider):
    """``models/<model>:generateContent`` endpoint; the API key travels as a query parameter."""

    name = "gemini"
    label = "Gemini"

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        transport: Transport | None = None,
    ) -> None:
        super().__init__(
            api_key,
            base_url=base_url or settings.gemini_base_url,
            model=model or settings.gemini_model,
            timeout=timeout,
            transport=transport,
        )

    def build_request(self, text: str) -> tuple[str, dict, dict[str, str], dict[str, str]]:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {"contents": build_generative_contents(text)}
        return url, payload, {}, {"key": self.api_key}

    def extract_reply(self, body: object) -> str | None:
        try:
            content = body["candidates"][0]["content"]["parts"][0]["text"]  # type: ignore[index]
        except (KeyError, IndexError, TypeError):
            return None
        return content if isinstance(content, str) else None
