"""Tests for match statistics endpoints."""

from httpx import AsyncClient


class TestMatchStats:
    async def test_stats(self, client: AsyncClient) -> None:
        response = await client.post(
            "/matches/stats",
            json={
                "decks": [
                    {"id": "d1", "name": "Charizard ex"},
                    {"id": "d2", "name": "Lost Box"},
                ],
                "matches": [
                    {"deck_id": "d1", "result": "win", "played_at": "2024-05-01T18:00:00Z"},
                    {
                        "deck_id": "d1",
                        "result": "lose",
                        "played_at": "2024-05-02T18:00:00Z",
                        "event_type": "liga",
                        "opponent_deck": "Gardevoir ex",
                        "ended_by_time": True,
                    },
                    {"deck_id": "d2", "result": "draw", "played_at": "2024-05-03T18:00:00Z"},
                ],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["stats"] == [
            {
                "deck_id": "d1",
                "deck_name": "Charizard ex",
                "total_matches": 2,
                "wins": 1,
                "losses": 1,
                "win_rate": 50,
            }
        ]
        assert data["total_wins"] == 1
        assert data["total_losses"] == 1
        assert [(p["match_number"], p["win_rate"]) for p in data["win_rate_over_time"]] == [
            (1, 100),
            (2, 50),
            (3, 33),
        ]

    async def test_no_matches(self, client: AsyncClient) -> None:
        response = await client.post(
            "/matches/stats", json={"decks": [{"id": "d1", "name": "Charizard ex"}]}
        )

        assert response.json() == {
            "stats": [],
            "total_wins": 0,
            "total_losses": 0,
            "win_rate_over_time": [],
        }

    async def test_invalid_result_rejected(self, client: AsyncClient) -> None:
        response = await client.post(
            "/matches/stats",
            json={
                "decks": [{"id": "d1", "name": "X"}],
                "matches": [{"deck_id": "d1", "result": "tie", "played_at": "2024-05-01"}],
            },
        )

        assert response.status_code == 422

    async def test_invalid_event_type_rejected(self, client: AsyncClient) -> None:
        response = await client.post(
            "/matches/stats",
            json={
                "decks": [{"id": "d1", "name": "X"}],
                "matches": [
                    {
                        "deck_id": "d1",
                        "result": "win",
                        "played_at": "2024-05-01T10:00:00Z",
                        "event_type": "worlds",
                    }
                ],
            },
        )

        assert response.status_code == 422

    async def test_timeline_skips_unknown_decks(self, client: AsyncClient) -> None:
        response = await client.post(
            "/matches/stats",
            json={
                "decks": [{"id": "d1", "name": "Charizard ex"}],
                "matches": [
                    {"deck_id": "d1", "result": "lose", "played_at": "2024-05-02T10:00:00Z"},
                    {"deck_id": "ghost", "result": "win", "played_at": "2024-05-01T10:00:00Z"},
                ],
            },
        )

        timeline = response.json()["win_rate_over_time"]
        assert [(p["match_number"], p["win_rate"]) for p in timeline] == [(1, 0)]
