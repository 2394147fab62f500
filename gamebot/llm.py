from __future__ import annotations

import logging
from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel

from config.settings import Settings, get_settings
from gamebot.errors import ConfigurationError


logger = logging.getLogger(__name__)


def build_chat_model(
    temperature: float,
    max_tokens: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> BaseChatModel:
    """Build a chat model for the configured provider.

    ``max_tokens=None`` leaves the output length to the provider.
    """
    settings = settings or get_settings()
    provider = settings.llm_provider.lower()

    if provider == "azure":
        from langchain_openai import AzureChatOpenAI

        endpoint = settings.azure_openai_endpoint
        if not settings.azure_api_key or not endpoint or not settings.azure_deployment:
            raise ConfigurationError(
                "Azure OpenAI is not configured. Set AZURE_OPENAI_API_KEY, "
                "ENGINE_NAME and AZURE_OPENAI_ENDPOINT (or INSTANCE_NAME)."
            )
        logger.info(
            "Building Azure chat model deployment=%s temperature=%s max_tokens=%s",
            settings.azure_deployment,
            temperature,
            max_tokens,
        )
        return AzureChatOpenAI(
            api_key=settings.azure_api_key,
            azure_endpoint=endpoint,
            azure_deployment=settings.azure_deployment,
            api_version=settings.azure_api_version,
            temperature=temperature,
            max_tokens=max_tokens,
            timeout=settings.llm_timeout,
        )

    if provider in ("gemini", "google"):
        from langchain_google_genai import ChatGoogleGenerativeAI

        if not settings.google_api_key:
            raise ConfigurationError(
                "GOOGLE_API_KEY not set. Please configure it in environment or .env"
            )
        logger.info(
            "Building Gemini chat model model=%s temperature=%s max_tokens=%s",
            settings.gemini_model,
            temperature,
            max_tokens,
        )
        return ChatGoogleGenerativeAI(
            model=settings.gemini_model,
            google_api_key=settings.google_api_key,
            temperature=temperature,
            max_output_tokens=max_tokens,
            timeout=settings.llm_timeout,
        )

    raise ConfigurationError(f"Unknown LLM_PROVIDER: {settings.llm_provider!r}")
