"""Application configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Development mode: when False, error details are hidden from clients
    dev_mode: bool = True

    # CORS
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # Chat-completion provider (primary)
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-3.5-turbo"

    # Generative-content provider (secondary)
    gemini_api_key: str = ""
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model: str = "gemini-1.5-flash"

    # Provider calls
    provider_timeout_seconds: float = 30.0
    provider_temperature: float = 0.1
    provider_max_tokens: int = 2000

    # Request limits
    max_text_length: int = 50_000
    max_request_bytes: int = 10 * 1024 * 1024  # 10 MB

    # Rate Limiting
    rate_limit_enabled: bool = True
    rate_limit_check: int = 20  # per client per minute

    # Grammar client
    api_base_url: str = "http://localhost:3001"
    client_timeout_seconds: float = 60.0

    # Logging
    log_level: str = "info"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
