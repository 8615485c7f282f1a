"""Chat-completion provider adapter."""

from gramcheck.config import settings
from gramcheck.core.prompt_builder import build_chat_messages
from gramcheck.services.providers.base import GrammarProvider, Transport


class OpenAIProvider(GrammarProvider):
    """OpenAI-compatible ``/chat/completions`` endpoint with bearer auth."""

    name = "openai"
    label = "OpenAI"

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
            base_url=base_url or settings.openai_base_url,
            model=model or settings.openai_model,
            timeout=timeout,
            transport=transport,
        )

    def build_request(self, text: str) -> tuple[str, dict, dict[str, str], None]:
        payload = {
            "model": self.model,
            "messages": build_chat_messages(text),
            "temperature": settings.provider_temperature,
            "max_tokens": settings.provider_max_tokens,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}
        return f"{self.base_url}/chat/completions", payload, headers, None

    def extract_reply(self, body: object) -> str | None:
        try:
            content = body["choices"][0]["message"]["content"]  # type: ignore[index]
        except (KeyError, IndexError, TypeError):
            return None
        return content if isinstance(content, str) else None
