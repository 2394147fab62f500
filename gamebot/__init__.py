"""Game tips assistant: resolve a game from a question, enrich it, advise."""
