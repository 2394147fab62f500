from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
import logging

from config.settings import get_settings
from gamebot.core.session import GameSession
from gamebot.errors import ConfigurationError, UpstreamFetchError
from gamebot.pipeline import GameTipsPipeline


settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="[%(asctime)s] %(levelname)s - %(message)s",
)
logger = logging.getLogger("gamebot")

app = FastAPI(title="Game Tips Assistant", version="1.0.0")

# CORS: allow local frontend during development
if settings.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# One conversation per process.
_session = GameSession()


def get_session() -> GameSession:
    return _session


@lru_cache(maxsize=1)
def _build_pipeline() -> GameTipsPipeline:
    return GameTipsPipeline(settings=get_settings())


def get_pipeline() -> GameTipsPipeline:
    try:
        return _build_pipeline()
    except ConfigurationError as exc:
        logger.error("Pipeline is not configured: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))


def require_question(question: Optional[str] = None) -> str:
    if not question or not question.strip():
        raise HTTPException(status_code=400, detail="Please provide a question")
    return question


# `question` stays the first dependency: it is checked before the pipeline is built.
@app.get("/gamequestion")
async def game_question(
    question: str = Depends(require_question),
    session: GameSession = Depends(get_session),
    pipeline: GameTipsPipeline = Depends(get_pipeline),
) -> Dict[str, Any]:
    logger.info("Incoming question: chars=%s history_turns=%s", len(question), len(session.memory))
    try:
        answer = await pipeline.run(question, session)
    except UpstreamFetchError as exc:
        logger.exception("Game details lookup failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))
    except Exception as exc:
        logger.exception("Error during processing: %s", exc)
        raise HTTPException(
            status_code=500,
            detail="An error occurred while processing your request.",
        )

    logger.info("Answered with %s chars", len(answer))
    return {"answer": answer}


@app.get("/resetconversation", response_class=PlainTextResponse)
async def reset_conversation(session: GameSession = Depends(get_session)) -> str:
    session.reset()
    return "The Chat was reset."


@app.get("/gethistory")
async def get_history(session: GameSession = Depends(get_session)) -> Dict[str, Any]:
    return {"history": [turn.model_dump() for turn in session.memory.get_all()]}


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Hi, all systems go!"


def run() -> None:
    import uvicorn

    logger.info("Server listening at %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
