"""
TCG Live JSON interchange format.

Example:
    {
      "name": "Charizard ex",
      "format": "Standard",
      "cards": [{"name": "Charmander", "count": 4}]
    }

The format carries no set code or collector number.
"""

from pydantic import BaseModel, Field


class TCGExportCard(BaseModel):
    """A single card line in the export format."""

    name: str = Field(..., min_length=1)
    count: int = Field(..., ge=0)


class TCGExportFormat(BaseModel):
    """A full deck in the export format."""

    name: str
    format: str
    cards: list[TCGExportCard] = Field(default_factory=list)
