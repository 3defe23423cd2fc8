"""
Metagame API endpoints.

The caller supplies the archetype list and a sample of public decks; this
service only does the arithmetic.
"""

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from pokedeck.models.metagame import Archetype
from pokedeck.services.metagame import calculate_metagame_share

router = APIRouter(prefix="/metagame", tags=["metagame"])


class ArchetypeModel(BaseModel):
    name: str = Field(..., min_length=1)
    tier: str
    win_rate: float | None = None


class PublicDeckModel(BaseModel):
    """A public deck, reduced to its archetype tag."""

    archetype: str | None = None


class MetagameShareRequest(BaseModel):
    """Request model for metagame shares."""

    archetypes: list[ArchetypeModel]
    decks: list[PublicDeckModel] = Field(default_factory=list)


class MetagameShareModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    tier: str
    meta_share: float = Field(..., description="Percent of public decks, one decimal")
    win_rate: float | None
    total_decks: int


class MetagameShareResponse(BaseModel):
    """Response model for metagame shares."""

    total_decks: int
    archetypes: list[MetagameShareModel]


@router.post("/share", response_model=MetagameShareResponse)
async def metagame_share(request: MetagameShareRequest) -> MetagameShareResponse:
    """Share of the public deck sample per archetype, largest first."""
    shares = calculate_metagame_share(
        [Archetype(name=a.name, tier=a.tier, win_rate=a.win_rate) for a in request.archetypes],
        [deck.archetype for deck in request.decks],
    )

    return MetagameShareResponse(
        total_decks=len(request.decks),
        archetypes=[MetagameShareModel.model_validate(share) for share in shares],
    )
