from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from pokedeck.main import app
from pokedeck.models.card import DeckCardEntry
from pokedeck.models.deck import DeckDraft

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def charcadet_list() -> str:
    """Short deck list whose Pokémon header disagrees with its cards."""
    return """Pokémon: 1
3 Charcadet PAR 26
Trainer: 0
Energy: 0"""


@pytest.fixture
def charizard_list() -> str:
    """A complete 60-card Standard deck list."""
    return (FIXTURES / "charizard_ex.txt").read_text(encoding="utf-8")


@pytest.fixture
def small_deck() -> DeckDraft:
    """One card of each section, no set information."""
    return DeckDraft(
        name="Charizard Test",
        format="Standard",
        cards=[
            DeckCardEntry(name="Fire Energy", quantity=7),
            DeckCardEntry(name="Ultra Ball", quantity=4),
            DeckCardEntry(name="Charizard ex", quantity=2),
        ],
    )


@pytest.fixture
async def client():
    """Provide an async test client for the app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
