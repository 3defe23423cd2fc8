from pokedeck.config import (
    LIMITED_MIN_DECK_SIZE,
    MAX_COPIES_PER_CARD,
    STANDARD_DECK_SIZE,
    Settings,
)


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.app_name == "pokedeck"
        assert settings.imported_deck_name == "Imported Deck"
        assert settings.cors_allow_origins == ["*"]

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("IMPORTED_DECK_NAME", "Deck Importado")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.imported_deck_name == "Deck Importado"


class TestDeckRules:
    def test_constants(self) -> None:
        assert STANDARD_DECK_SIZE == 60
        assert LIMITED_MIN_DECK_SIZE == 40
        assert MAX_COPIES_PER_CARD == 4
