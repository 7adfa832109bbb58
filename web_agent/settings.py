"""Application settings using Pydantic BaseSettings."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CHAT_API_PATH = "/api/chat"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Brand Web Agent"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "INFO"
    api_prefix: str = "/api"

    # Brands
    default_brand: str = "master"

    # LLM (Gemini) - optional for basic functionality
    llm_mode: str = "gemini"
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    llm_temperature: float = 0.3
    llm_max_output_tokens: int = 768

    # Widget
    # Full URL of the chat endpoint used by the widget; relative path when unset
    public_api_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("NEXT_PUBLIC_API_URL", "PUBLIC_API_URL"),
    )
    widget_base_url: str | None = None  # Origin used in the embed snippet
    login_path: str = "/auth/login"

    # CORS (comma separated)
    cors_origins: str = "*"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def chat_api_url(self) -> str:
        """URL the widget posts chat messages to."""
        return self.public_api_url or DEFAULT_CHAT_API_PATH

    @property
    def cors_origin_list(self) -> list[str]:
        """CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
