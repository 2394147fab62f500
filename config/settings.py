from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


class Settings:
    """Application settings loaded from environment variables.

    Keep all credentials and config centralized here.
    """

    app_env: str = os.getenv("APP_ENV", "development")
    host: str = os.getenv("HOST", "0.0.0.0")
    # 3050 because the React client claims 3000
    port: int = int(os.getenv("PORT", "3050"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    llm_provider: str = os.getenv("LLM_PROVIDER", "azure")
    azure_api_key: Optional[str] = os.getenv("AZURE_OPENAI_API_KEY")
    azure_endpoint: Optional[str] = os.getenv("AZURE_OPENAI_ENDPOINT")
    azure_instance_name: Optional[str] = os.getenv("INSTANCE_NAME")
    azure_deployment: Optional[str] = os.getenv("ENGINE_NAME")
    azure_api_version: str = os.getenv("OPENAI_API_VERSION", "2024-02-01")
    google_api_key: Optional[str] = os.getenv("GOOGLE_API_KEY")
    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

    # Name extraction stays near-deterministic and short.
    resolver_temperature: float = float(os.getenv("RESOLVER_TEMPERATURE", "0.1"))
    resolver_max_tokens: int = int(os.getenv("RESOLVER_MAX_TOKENS", "64"))
    tips_temperature: float = float(os.getenv("TIPS_TEMPERATURE", "0.65"))
    # Seconds; unset leaves the provider client default.
    llm_timeout: Optional[float] = (
        float(os.environ["LLM_TIMEOUT"]) if os.getenv("LLM_TIMEOUT") else None
    )

    rawg_api_key: Optional[str] = os.getenv("RAWG_API_KEY")
    rawg_api_url: str = os.getenv("RAWG_API_URL", "https://api.rawg.io/api/games")
    rawg_timeout: float = float(os.getenv("RAWG_TIMEOUT", "10"))

    @property
    def azure_openai_endpoint(self) -> Optional[str]:
        if self.azure_endpoint:
            return self.azure_endpoint
        if self.azure_instance_name:
            return f"https://{self.azure_instance_name}.openai.azure.com/"
        return None

    @property
    def cors_enabled(self) -> bool:
        return self.app_env.lower() in {"dev", "development", "local"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
