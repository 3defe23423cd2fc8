"""Tests for metagame endpoints."""

from httpx import AsyncClient


class TestMetagameShare:
    async def test_share(self, client: AsyncClient) -> None:
        response = await client.post(
            "/metagame/share",
            json={
                "archetypes": [
                    {"name": "Lost Box", "tier": "B"},
                    {"name": "Charizard ex", "tier": "S", "win_rate": 54.5},
                ],
                "decks": [
                    {"archetype": "Charizard ex"},
                    {"archetype": "Charizard ex"},
                    {"archetype": "Lost Box"},
                    {},
                ],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total_decks"] == 4
        assert data["archetypes"] == [
            {
                "name": "Charizard ex",
                "tier": "S",
                "meta_share": 50.0,
                "win_rate": 54.5,
                "total_decks": 2,
            },
            {
                "name": "Lost Box",
                "tier": "B",
                "meta_share": 25.0,
                "win_rate": None,
                "total_decks": 1,
            },
        ]

    async def test_archetype_name_required(self, client: AsyncClient) -> None:
        response = await client.post(
            "/metagame/share",
            json={"archetypes": [{"name": "", "tier": "S"}]},
        )

        assert response.status_code == 422
