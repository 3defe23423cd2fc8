"""Tests for deck API endpoints."""

import json

from httpx import AsyncClient

SMALL_DECK = {
    "name": "Charizard Test",
    "format": "Standard",
    "cards": [
        {"name": "Fire Energy", "quantity": 7},
        {"name": "Ultra Ball", "quantity": 4},
        {"name": "Charizard ex", "quantity": 2},
    ],
}


class TestImportText:
    async def test_import_returns_deck_and_warnings(
        self, client: AsyncClient, charcadet_list: str
    ) -> None:
        response = await client.post("/decks/import/text", json={"text": charcadet_list})

        assert response.status_code == 200
        data = response.json()
        assert data["deck"]["name"] == "Imported Deck"
        assert data["deck"]["format"] == "Unknown"
        assert data["deck"]["cards"] == [
            {
                "name": "Charcadet",
                "quantity": 3,
                "image_url": "",
                "code": "26",
                "set_code": "PAR",
                "types": None,
                "subtypes": None,
            }
        ]
        assert data["total_cards"] == 3
        assert "Section pokemon declared 1 but found 3" in data["warnings"]

    async def test_full_deck(self, client: AsyncClient, charizard_list: str) -> None:
        response = await client.post("/decks/import/text", json={"text": charizard_list})

        data = response.json()
        assert data["deck"]["format"] == "Standard"
        assert data["total_cards"] == 60
        assert data["warnings"] == []

    async def test_empty_text_rejected(self, client: AsyncClient) -> None:
        response = await client.post("/decks/import/text", json={"text": "   "})

        assert response.status_code == 400
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "invalid_input"
        assert data["failure"]["message"] == "Import text cannot be empty"

    async def test_missing_text_rejected(self, client: AsyncClient) -> None:
        response = await client.post("/decks/import/text", json={})

        assert response.status_code == 422


class TestImportJson:
    async def test_import(self, client: AsyncClient) -> None:
        payload = json.dumps(
            {"name": "Lost Box", "format": "Standard", "cards": [{"name": "Comfey", "count": 4}]}
        )
        response = await client.post("/decks/import/json", json={"data": payload})

        assert response.status_code == 200
        data = response.json()
        assert data["deck"]["name"] == "Lost Box"
        assert data["deck"]["cards"][0]["name"] == "Comfey"
        assert data["deck"]["cards"][0]["quantity"] == 4
        assert data["deck"]["cards"][0]["set_code"] is None
        assert data["total_cards"] == 4
        assert data["warnings"] == []

    async def test_invalid_json_returns_failure_envelope(self, client: AsyncClient) -> None:
        response = await client.post("/decks/import/json", json={"data": "{oops"})

        assert response.status_code == 400
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "invalid_deck_format"
        assert data["failure"]["message"] == "Invalid deck format"

    async def test_blank_card_name_is_invalid_format(self, client: AsyncClient) -> None:
        payload = json.dumps(
            {"name": "X", "format": "Standard", "cards": [{"name": "", "count": 2}]}
        )
        response = await client.post("/decks/import/json", json={"data": payload})

        assert response.status_code == 400
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "invalid_deck_format"
        assert data["failure"]["detail"].startswith("cards.0.name")


class TestExport:
    async def test_export_json(self, client: AsyncClient) -> None:
        response = await client.post("/decks/export/json", json=SMALL_DECK)

        assert response.status_code == 200
        data = response.json()
        assert data["export_format"] == "json"
        exported = json.loads(data["content"])
        assert exported["cards"][2] == {"name": "Charizard ex", "count": 2}

    async def test_export_text(self, client: AsyncClient) -> None:
        response = await client.post("/decks/export/text", json=SMALL_DECK)

        assert response.status_code == 200
        content = response.json()["content"]
        headers = [line for line in content.splitlines() if line.endswith(tuple("0123456789"))]
        assert content.splitlines()[0] == "Pokémon: 2"
        assert "Trainer: 4" in headers
        assert "Energy: 7" in headers

    async def test_strict_export_rejects_illegal_deck(self, client: AsyncClient) -> None:
        response = await client.post("/decks/export/text?strict=true", json=SMALL_DECK)

        assert response.status_code == 422
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "format_illegal"
        assert "current: 13" in data["failure"]["detail"]

    async def test_non_strict_export_allows_illegal_deck(self, client: AsyncClient) -> None:
        response = await client.post("/decks/export/json?strict=false", json=SMALL_DECK)

        assert response.status_code == 200

    async def test_invalid_card_rejected(self, client: AsyncClient) -> None:
        deck = {"name": "X", "format": "Standard", "cards": [{"name": "", "quantity": 1}]}
        response = await client.post("/decks/export/text", json=deck)

        assert response.status_code == 422


class TestValidate:
    async def test_invalid_deck(self, client: AsyncClient) -> None:
        response = await client.post("/decks/validate", json=SMALL_DECK)

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"] == ["Deck must have exactly 60 cards (current: 13)"]

    async def test_valid_deck(self, client: AsyncClient) -> None:
        deck = {"name": "X", "format": "Unknown", "cards": [{"name": "Iono", "quantity": 4}]}
        response = await client.post("/decks/validate", json=deck)

        assert response.json() == {"is_valid": True, "errors": []}


class TestAnalyze:
    async def test_analyze(self, client: AsyncClient) -> None:
        response = await client.post("/decks/analyze", json=SMALL_DECK)

        assert response.status_code == 200
        data = response.json()
        assert data["stats"]["total_cards"] == 13
        assert data["stats"]["type_distribution"] == {"Pokémon": 2, "Trainer": 4, "Energy": 7}
        assert data["dominant_type"] == "Energy"
        assert data["type_counts"][0] == {"type": "Energy", "count": 7, "percentage": 54}
        assert isinstance(data["overall_score"], int)
        assert data["recommendation"] == "Few Pokémon in the deck. Consider adding more"


class TestCompatibility:
    async def test_missing_cards(self, client: AsyncClient) -> None:
        response = await client.post(
            "/decks/compatibility",
            json={"cards": SMALL_DECK["cards"], "collection": {"Fire Energy": 10, "Ultra Ball": 1}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["can_build"] is False
        assert data["missing_cards"] == [
            {"name": "Ultra Ball", "needed": 4, "available": 1},
            {"name": "Charizard ex", "needed": 2, "available": 0},
        ]

    async def test_negative_quantity_rejected(self, client: AsyncClient) -> None:
        response = await client.post(
            "/decks/compatibility",
            json={"cards": [], "collection": {"Iono": -1}},
        )

        assert response.status_code == 400
        assert response.json()["failure"]["kind"] == "invalid_input"
