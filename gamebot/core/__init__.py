from gamebot.core.memory import ChatTurn, ConversationMemory
from gamebot.core.session import GameSession

__all__ = ["ChatTurn", "ConversationMemory", "GameSession"]
