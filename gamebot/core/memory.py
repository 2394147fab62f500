"""Server-side conversation memory.

A single ordered list of turns is the only record of the conversation. The
tip generator reads it through ``as_messages`` so there is no second buffer
to keep in sync.
"""

from __future__ import annotations

import logging
from typing import List, Literal

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)

Role = Literal["human", "assistant"]


class ChatTurn(BaseModel):
    role: Role = Field(..., description="'human' or 'assistant'")
    text: str


class ConversationMemory:
    def __init__(self) -> None:
        self._turns: List[ChatTurn] = []

    def __len__(self) -> int:
        return len(self._turns)

    def append(self, role: Role, text: str) -> ChatTurn:
        turn = ChatTurn(role=role, text=text)
        self._turns.append(turn)
        logger.info("Updated chat history role=%s chars=%s", role, len(text))
        return turn

    def add_human(self, text: str) -> ChatTurn:
        return self.append("human", text)

    def add_assistant(self, text: str) -> ChatTurn:
        return self.append("assistant", text)

    def get_all(self) -> List[ChatTurn]:
        return list(self._turns)

    def as_messages(self) -> List[BaseMessage]:
        messages: List[BaseMessage] = []
        for turn in self._turns:
            if turn.role == "human":
                messages.append(HumanMessage(content=turn.text))
            else:
                messages.append(AIMessage(content=turn.text))
        return messages

    def clear(self) -> None:
        self._turns.clear()
