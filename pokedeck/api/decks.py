"""
Deck API endpoints.

Stateless conversions over deck lists: import from text or TCG Live JSON,
export back to either format, and check legality, composition and
collection coverage. Nothing is persisted here; callers hand the returned
deck to their own storage.
"""

from typing import Annotated, Literal

from fastapi import APIRouter, Query
from pydantic import BaseModel, ConfigDict, Field

from pokedeck.models.card import DeckCardEntry
from pokedeck.models.deck import DeckDraft
from pokedeck.models.failure import InvalidInputError
from pokedeck.parsers.deck_text import import_deck_text
from pokedeck.parsers.tcg_json import import_from_json
from pokedeck.services.deck_analysis import analyze_deck
from pokedeck.services.deck_compatibility import check_deck_compatibility
from pokedeck.services.deck_formatter import export_to_json, export_to_text
from pokedeck.services.deck_validator import ensure_deck_is_legal, validate_deck_format

router = APIRouter(prefix="/decks", tags=["decks"])


class DeckCardModel(BaseModel):
    """A card entry as sent and returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    name: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=0)
    image_url: str = ""
    code: str = ""
    set_code: str | None = None
    types: list[str] | None = None
    subtypes: list[str] | None = None


class DeckModel(BaseModel):
    """A deck as sent and returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    format: str
    cards: list[DeckCardModel] = Field(default_factory=list)


class TextImportRequest(BaseModel):
    """Request model for importing a deck list."""

    text: str = Field(
        ...,
        description="Deck list text as pasted from TCG Live or a deck builder",
        examples=["Pokémon: 1\n3 Charcadet PAR 26"],
    )


class JsonImportRequest(BaseModel):
    """Request model for importing a TCG Live JSON export."""

    data: str = Field(
        ...,
        description="Export JSON, as a string",
        examples=['{"name": "My Deck", "format": "Standard", "cards": []}'],
    )


class ImportResponse(BaseModel):
    """Response model for deck imports."""

    deck: DeckModel
    total_cards: int
    warnings: list[str] = Field(
        default_factory=list,
        description="Header counts that disagree with the cards found (informational)",
    )


class ExportResponse(BaseModel):
    """Response model for deck exports."""

    export_format: Literal["json", "text"]
    content: str


class ValidationResponse(BaseModel):
    """Response model for format validation."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list)


class DeckStatsModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_cards: int
    unique_cards: int
    type_distribution: dict[str, int] = Field(default_factory=dict)


class TypeCountModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: str
    count: int
    percentage: int


class SuggestionModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: str
    title: str
    description: str
    priority: str


class AnalysisResponse(BaseModel):
    """Response model for deck analysis."""

    model_config = ConfigDict(from_attributes=True)

    stats: DeckStatsModel
    type_counts: list[TypeCountModel]
    dominant_type: str
    suggestions: list[SuggestionModel]
    overall_score: int
    recommendation: str


class CompatibilityRequest(BaseModel):
    """Request model for checking a deck against a collection."""

    cards: list[DeckCardModel]
    collection: dict[str, int] = Field(
        ...,
        description="Owned cards {name: quantity}",
        examples=[{"Charcadet": 4, "Ultra Ball": 2}],
    )


class MissingCardModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    needed: int
    available: int


class CompatibilityResponse(BaseModel):
    """Response model for collection compatibility."""

    model_config = ConfigDict(from_attributes=True)

    can_build: bool
    missing_cards: list[MissingCardModel] = Field(default_factory=list)


def to_draft(deck: DeckModel) -> DeckDraft:
    """Convert an API deck to the domain model."""
    return DeckDraft(
        name=deck.name,
        format=deck.format,
        cards=[_to_entry(card) for card in deck.cards],
    )


def _to_entry(card: DeckCardModel) -> DeckCardEntry:
    return DeckCardEntry(
        name=card.name,
        quantity=card.quantity,
        image_url=card.image_url,
        code=card.code,
        set_code=card.set_code,
        types=tuple(card.types) if card.types is not None else None,
        subtypes=tuple(card.subtypes) if card.subtypes is not None else None,
    )


@router.post("/import/text", response_model=ImportResponse)
async def import_deck_list(request: TextImportRequest) -> ImportResponse:
    """
    Import a deck from deck list text.

    Unrecognized lines are skipped. Header counts that disagree with the
    cards found are reported as warnings and never block the import.

    Blank text is rejected with 400 (invalid_input), unlike
    import_from_text, which returns an empty draft for it.
    """
    if not request.text.strip():
        raise InvalidInputError(
            "Import text cannot be empty",
            suggestion="Paste a deck list exported from TCG Live.",
        )

    draft, warnings = import_deck_text(request.text)

    return ImportResponse(
        deck=DeckModel.model_validate(draft),
        total_cards=draft.total_cards(),
        warnings=warnings,
    )


@router.post("/import/json", response_model=ImportResponse)
async def import_deck_json(request: JsonImportRequest) -> ImportResponse:
    """
    Import a deck from TCG Live export JSON.

    Returns 400 with a failure envelope if the JSON is not a valid export.
    """
    draft = import_from_json(request.data)

    return ImportResponse(
        deck=DeckModel.model_validate(draft),
        total_cards=draft.total_cards(),
    )


@router.post("/export/json", response_model=ExportResponse)
async def export_deck_json(
    deck: DeckModel,
    strict: Annotated[bool, Query(description="Refuse decks that break format rules")] = False,
) -> ExportResponse:
    """Export a deck as TCG Live JSON. Set codes and numbers are not included."""
    draft = to_draft(deck)
    if strict:
        ensure_deck_is_legal(draft)

    return ExportResponse(export_format="json", content=export_to_json(draft))


@router.post("/export/text", response_model=ExportResponse)
async def export_deck_text(
    deck: DeckModel,
    strict: Annotated[bool, Query(description="Refuse decks that break format rules")] = False,
) -> ExportResponse:
    """Export a deck as Pokémon / Trainer / Energy deck list text."""
    draft = to_draft(deck)
    if strict:
        ensure_deck_is_legal(draft)

    return ExportResponse(export_format="text", content=export_to_text(draft))


@router.post("/validate", response_model=ValidationResponse)
async def validate_deck(deck: DeckModel) -> ValidationResponse:
    """
    Check a deck against its format rules.

    Always returns 200; callers decide whether to block on is_valid.
    """
    result = validate_deck_format(to_draft(deck))
    return ValidationResponse(is_valid=result.is_valid, errors=result.errors)


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze_deck_composition(deck: DeckModel) -> AnalysisResponse:
    """Break a deck down by section and suggest improvements."""
    analysis = analyze_deck(to_draft(deck))
    return AnalysisResponse.model_validate(analysis)


@router.post("/compatibility", response_model=CompatibilityResponse)
async def check_compatibility(request: CompatibilityRequest) -> CompatibilityResponse:
    """Report which deck entries the given collection cannot cover."""
    for card_name, qty in request.collection.items():
        if qty < 0:
            raise InvalidInputError(f"Quantity for '{card_name}' cannot be negative")

    compatibility = check_deck_compatibility(
        [_to_entry(card) for card in request.cards],
        request.collection,
    )
    return CompatibilityResponse.model_validate(compatibility)
