"""Tests for conversation memory and the game session."""

import pytest
from langchain_core.messages import AIMessage, HumanMessage
from pydantic import ValidationError

from gamebot.core.memory import ConversationMemory
from gamebot.core.session import GameSession


class TestConversationMemory:
    def setup_method(self):
        self.memory = ConversationMemory()

    def test_starts_empty(self):
        assert len(self.memory) == 0
        assert self.memory.get_all() == []

    def test_append_keeps_order(self):
        self.memory.add_human("how do I beat Malenia?")
        self.memory.add_assistant("Use bleed builds.")
        self.memory.add_human("and Radahn?")

        turns = self.memory.get_all()
        assert [t.role for t in turns] == ["human", "assistant", "human"]
        assert turns[2].text == "and Radahn?"

    def test_get_all_returns_copy(self):
        self.memory.add_human("hi")
        self.memory.get_all().clear()
        assert len(self.memory) == 1

    def test_rejects_unknown_role(self):
        with pytest.raises(ValidationError):
            self.memory.append("system", "nope")

    def test_as_messages(self):
        self.memory.add_human("q")
        self.memory.add_assistant("a")
        messages = self.memory.as_messages()
        assert isinstance(messages[0], HumanMessage)
        assert isinstance(messages[1], AIMessage)
        assert [m.content for m in messages] == ["q", "a"]

    def test_clear(self):
        self.memory.add_human("q")
        self.memory.clear()
        assert self.memory.get_all() == []


class TestGameSession:
    def test_defaults(self):
        session = GameSession()
        assert session.current_game is None
        assert len(session.memory) == 0

    def test_reset_clears_history_and_game(self):
        session = GameSession()
        session.remember_game("Hades")
        session.memory.add_human("tips for Hades")
        session.memory.add_assistant("Dash a lot.")

        session.reset()

        assert session.current_game is None
        assert session.memory.get_all() == []

    def test_commit_exchange_appends_pair(self):
        session = GameSession()
        assert session.commit_exchange("q", "a", session.generation) is True
        assert [(t.role, t.text) for t in session.memory.get_all()] == [
            ("human", "q"),
            ("assistant", "a"),
        ]

    def test_writes_from_before_reset_are_dropped(self):
        session = GameSession()
        stale = session.generation
        session.reset()

        assert session.commit_exchange("q", "a", stale) is False
        assert session.remember_game("Hades", stale) is False
        assert session.memory.get_all() == []
        assert session.current_game is None

    def test_turn_serializes_role_and_text(self):
        turn = ConversationMemory().add_human("hi")
        assert turn.model_dump() == {"role": "human", "text": "hi"}
