from pokedeck.api.decks import router as decks_router
from pokedeck.api.health import router as health_router
from pokedeck.api.matches import router as matches_router
from pokedeck.api.metagame import router as metagame_router

__all__ = [
    "decks_router",
    "health_router",
    "matches_router",
    "metagame_router",
]
