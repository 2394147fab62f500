from __future__ import annotations

import logging
from typing import Optional, Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from config.settings import Settings, get_settings
from gamebot.core.prompt import SYSTEM_PROMPT
from gamebot.llm import build_chat_model
from gamebot.tools.game_details import GameContext, GameRecord


logger = logging.getLogger(__name__)


def build_tips_prompt() -> ChatPromptTemplate:
    return ChatPromptTemplate.from_messages(
        [
            ("system", SYSTEM_PROMPT),
            MessagesPlaceholder("chat_history", optional=True),
            ("human", "{question}"),
        ]
    )


def render_context(context: GameContext) -> str:
    if isinstance(context, GameRecord):
        return context.describe()
    if context:
        return str(context)
    return "None"


def combine_question(question: str, context: GameContext) -> str:
    return f"User Question : {question}\nGame Context : {render_context(context)}"


class TipGenerator:
    def __init__(
        self,
        llm: Optional[BaseChatModel] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        if llm is None:
            llm = build_chat_model(
                temperature=settings.tips_temperature,
                max_tokens=None,
                settings=settings,
            )
        self.chain = build_tips_prompt() | llm | StrOutputParser()

    async def generate(
        self,
        question: str,
        context: GameContext,
        history: Sequence[BaseMessage] = (),
    ) -> str:
        combined = combine_question(question, context)
        logger.info(
            "Generating tips: history_turns=%s context=%r",
            len(history),
            render_context(context),
        )
        answer = await self.chain.ainvoke(
            {"question": combined, "chat_history": list(history)}
        )
        return answer.strip()
