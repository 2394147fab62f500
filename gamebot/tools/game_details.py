from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

import httpx
from pydantic import BaseModel, Field, ValidationError, model_validator

from config.settings import Settings, get_settings
from gamebot.core.session import GameSession
from gamebot.errors import ConfigurationError, UpstreamFetchError
from gamebot.resolver import Resolution, Resolved


logger = logging.getLogger(__name__)


def _names(items: Any, nested_key: Optional[str] = None) -> List[str]:
    names: List[str] = []
    for item in items or []:
        if isinstance(item, str):
            names.append(item)
            continue
        if not isinstance(item, dict):
            continue
        if nested_key and isinstance(item.get(nested_key), dict):
            item = item[nested_key]
        name = item.get("name")
        if name:
            names.append(name)
    return names


class GameRecord(BaseModel):
    id: Optional[int] = None
    name: str
    slug: Optional[str] = None
    platforms: List[str] = Field(default_factory=list)
    released: Optional[str] = None
    rating: Optional[float] = None
    metacritic: Optional[int] = None
    genres: List[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _flatten_rawg(cls, values):
        # RAWG nests platform names as {"platform": {"name": ...}}
        if isinstance(values, dict):
            values = dict(values)
            values["platforms"] = _names(values.get("platforms"), nested_key="platform")
            values["genres"] = _names(values.get("genres"))
        return values

    def describe(self) -> str:
        parts = [f"Name: {self.name}"]
        if self.platforms:
            parts.append(f"Platforms: {', '.join(self.platforms)}")
        if self.released:
            parts.append(f"Released: {self.released}")
        if self.rating is not None:
            parts.append(f"Rating: {self.rating}")
        if self.metacritic is not None:
            parts.append(f"Metacritic: {self.metacritic}")
        if self.genres:
            parts.append(f"Genres: {', '.join(self.genres)}")
        return "; ".join(parts)


GameContext = Union[GameRecord, str, None]


def _first_result(data: Dict[str, Any]) -> Optional[GameRecord]:
    results = data.get("results")
    if not isinstance(results, list):
        raise UpstreamFetchError("Game search response has no 'results' array")
    if not results:
        return None
    try:
        return GameRecord.model_validate(results[0])
    except ValidationError as exc:
        raise UpstreamFetchError(f"Unexpected game search result: {exc}") from exc


class GameDetailsLookup:
    """Looks up game metadata on RAWG, falling back to the session's cached game."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.transport = transport

    async def lookup(
        self,
        resolution: Resolution,
        session: GameSession,
        generation: Optional[int] = None,
    ) -> GameContext:
        if not isinstance(resolution, Resolved):
            logger.info("No game in question; reusing cached game %r", session.current_game)
            return session.current_game

        session.remember_game(resolution.name, generation)
        return await self.fetch(resolution.name)

    async def fetch(self, game_name: str) -> Optional[GameRecord]:
        settings = self.settings
        if not settings.rawg_api_key:
            raise ConfigurationError("RAWG_API_KEY not configured")

        params = {"search": game_name, "key": settings.rawg_api_key}
        logger.info("Searching game details for %r", game_name)
        try:
            async with httpx.AsyncClient(
                timeout=settings.rawg_timeout, transport=self.transport
            ) as client:
                response = await client.get(settings.rawg_api_url, params=params)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            logger.error("Failed to fetch game details: HTTP %s", exc.response.status_code)
            raise UpstreamFetchError(
                f"Game search failed: {exc.response.status_code} {exc.response.reason_phrase}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("Failed to fetch game details: %s", exc)
            raise UpstreamFetchError(f"Game search API call failed: {exc}") from exc
        except ValueError as exc:
            raise UpstreamFetchError(f"Game search returned invalid JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise UpstreamFetchError("Game search returned an unexpected payload")
        record = _first_result(data)
        if record is None:
            logger.info("No game details found for %r", game_name)
        else:
            logger.info("Found game details: %s", record.name)
        return record
