from __future__ import annotations

import logging
from typing import Optional, Union

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import PromptTemplate
from pydantic import BaseModel, ConfigDict

from config.settings import Settings, get_settings
from gamebot.core.prompt import GAME_NAME_TEMPLATE, NO_GAME_SENTINEL
from gamebot.llm import build_chat_model


logger = logging.getLogger(__name__)


class Resolved(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class Unresolved(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw: str = ""


Resolution = Union[Resolved, Unresolved]


def parse_game_name(text: str) -> Resolution:
    """Turn the resolver model's raw answer into a tagged result."""
    cleaned = (text or "").strip()
    if cleaned.lower().startswith("game_name:"):
        cleaned = cleaned[len("game_name:"):].strip()
    cleaned = cleaned.strip("\"'`").strip()
    if not cleaned or NO_GAME_SENTINEL in cleaned.lower():
        return Unresolved(raw=text or "")
    return Resolved(name=cleaned)


class GameNameResolver:
    def __init__(
        self,
        llm: Optional[BaseChatModel] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        if llm is None:
            llm = build_chat_model(
                temperature=settings.resolver_temperature,
                max_tokens=settings.resolver_max_tokens,
                settings=settings,
            )
        self.chain = PromptTemplate.from_template(GAME_NAME_TEMPLATE) | llm | StrOutputParser()

    async def resolve(self, question: str) -> Resolution:
        answer = await self.chain.ainvoke({"question": question})
        logger.info("Resolver answered: %r", answer.strip())
        return parse_game_name(answer)
