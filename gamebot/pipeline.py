from __future__ import annotations

import logging
from typing import Optional

from config.settings import Settings, get_settings
from gamebot.core.session import GameSession
from gamebot.generator import TipGenerator
from gamebot.resolver import GameNameResolver
from gamebot.tools.game_details import GameDetailsLookup


logger = logging.getLogger(__name__)


class GameTipsPipeline:
    """Resolve the game, look up its details, then generate tips.

    Remote calls run without holding any session state, so a slow upstream
    only delays its own request. The question and the answer are committed
    together after the whole chain succeeds, and only if the session was not
    reset in the meantime, so the history always alternates human/assistant.
    """

    def __init__(
        self,
        resolver: Optional[GameNameResolver] = None,
        lookup: Optional[GameDetailsLookup] = None,
        generator: Optional[TipGenerator] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.resolver = resolver or GameNameResolver(settings=settings)
        self.lookup = lookup or GameDetailsLookup(settings=settings)
        self.generator = generator or TipGenerator(settings=settings)

    async def run(self, question: str, session: GameSession) -> str:
        generation = session.generation
        history = session.memory.as_messages()

        resolution = await self.resolver.resolve(question)
        context = await self.lookup.lookup(resolution, session, generation)
        answer = await self.generator.generate(question, context, history=history)

        session.commit_exchange(question, answer, generation)
        return answer
