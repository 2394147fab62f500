SYSTEM_PROMPT = (
    "You are a game tips provider. When a human asks for help with a game, "
    "provide tips relevant to the game. If you do not know much about the game, "
    "provide approximate tips. If you get Game Context information data, provide "
    "details such as the game's platform, release year and rating."
)

NO_GAME_SENTINEL = "no-game"

GAME_NAME_TEMPLATE = (
    "You will return the game_name from the user's question "
    "If there is no game, return " + NO_GAME_SENTINEL + " to game_name.: {question}\n"
    "game_name:"
)
