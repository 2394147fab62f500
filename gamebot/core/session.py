from __future__ import annotations

import logging
from typing import Optional

from gamebot.core.memory import ConversationMemory


logger = logging.getLogger(__name__)


class GameSession:
    """Conversation state shared by the pipeline calls of one session.

    ``current_game`` is the last name the resolver produced since the last
    reset, or ``None`` if no game has been resolved yet. ``generation`` is
    bumped on every reset; writes tagged with an older generation come from
    requests that started before the reset and are dropped.

    None of the methods await, so each one runs without interleaving on the
    event loop.
    """

    def __init__(self) -> None:
        self.memory = ConversationMemory()
        self.current_game: Optional[str] = None
        self.generation = 0

    def is_current(self, generation: Optional[int]) -> bool:
        return generation is None or generation == self.generation

    def remember_game(self, name: str, generation: Optional[int] = None) -> bool:
        if not self.is_current(generation):
            logger.info("Ignoring game %r from a request started before reset", name)
            return False
        if name != self.current_game:
            logger.info("Current game changed: %r -> %r", self.current_game, name)
        self.current_game = name
        return True

    def commit_exchange(self, question: str, answer: str, generation: Optional[int] = None) -> bool:
        """Append a question and its answer as one adjacent pair."""
        if not self.is_current(generation):
            logger.info("Dropping exchange from a request started before reset")
            return False
        self.memory.add_human(question)
        self.memory.add_assistant(answer)
        return True

    def reset(self) -> None:
        self.generation += 1
        self.memory.clear()
        self.current_game = None
        logger.info("The chat history was reset")
