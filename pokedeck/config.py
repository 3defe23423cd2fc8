from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", frozen=True)

    app_name: str = "pokedeck"
    debug: bool = False
    log_level: str = "INFO"

    cors_allow_origins: list[str] = ["*"]

    # Name given to decks built from pasted text, which carries no name of its own
    imported_deck_name: str = "Imported Deck"


settings = Settings()


# =============================================================================
# DECK RULES
# =============================================================================

# Standard and Expanded decks are exactly this size
STANDARD_DECK_SIZE = 60

# Limited decks must reach at least this size
LIMITED_MIN_DECK_SIZE = 40

# Copies allowed per card name (basic energy is exempt)
MAX_COPIES_PER_CARD = 4
