from gamebot.tools.game_details import GameContext, GameDetailsLookup, GameRecord

__all__ = ["GameContext", "GameDetailsLookup", "GameRecord"]
