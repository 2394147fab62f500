import httpx
import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from config.settings import Settings
from gamebot.core.session import GameSession
from gamebot.generator import TipGenerator
from gamebot.pipeline import GameTipsPipeline
from gamebot.resolver import GameNameResolver
from gamebot.tools.game_details import GameDetailsLookup


ELDEN_RING = {
    "id": 326243,
    "slug": "elden-ring",
    "name": "Elden Ring",
    "released": "2022-02-25",
    "rating": 4.4,
    "metacritic": 94,
    "platforms": [
        {"platform": {"id": 4, "name": "PC"}},
        {"platform": {"id": 187, "name": "PlayStation 5"}},
    ],
    "genres": [{"id": 4, "name": "Action"}, {"id": 5, "name": "RPG"}],
}


class RecordingTransport:
    """httpx mock transport that records every request it serves."""

    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self.payload = {"results": [ELDEN_RING]} if payload is None else payload
        self.requests = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request):
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture
def settings():
    s = Settings()
    s.rawg_api_key = "test-key"
    s.rawg_api_url = "https://api.rawg.test/api/games"
    return s


@pytest.fixture
def session():
    return GameSession()


@pytest.fixture
def rawg():
    return RecordingTransport()


@pytest.fixture
def make_pipeline(settings, rawg):
    def build(resolver_answers, tips_answers):
        return GameTipsPipeline(
            resolver=GameNameResolver(
                llm=FakeListChatModel(responses=resolver_answers), settings=settings
            ),
            lookup=GameDetailsLookup(settings=settings, transport=rawg.transport),
            generator=TipGenerator(
                llm=FakeListChatModel(responses=tips_answers), settings=settings
            ),
            settings=settings,
        )

    return build
