import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
class TestScheduleAPI:
    """Tests for /api/v1/tournaments/{id}/schedule endpoints."""

    async def test_empty_schedule(self, client: AsyncClient, saved_tournament):
        response = await client.get(f"/api/v1/tournaments/{saved_tournament.id}/schedule")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "UPCOMING"
        assert data["rounds"] == []
        assert data["total_matches"] == 0

    async def test_generate(self, client: AsyncClient, saved_tournament):
        response = await client.post(
            f"/api/v1/tournaments/{saved_tournament.id}/schedule", json={"seed": 4},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "ONGOING"
        assert data["total_rounds"] == 3
        assert data["total_series"] == 6
        assert data["expected_series"] == 6
        assert [r["round"] for r in data["rounds"]] == [1, 2, 3]
        for round_ in data["rounds"]:
            assert len(round_["series"]) == 2
            for series in round_["series"]:
                assert len(series["matches"]) == series["match_count"]
                assert series["completed_count"] == 0
                assert series["team1_name"]

    async def test_generate_without_body(self, client: AsyncClient, saved_tournament):
        response = await client.post(f"/api/v1/tournaments/{saved_tournament.id}/schedule")
        assert response.status_code == 201

    async def test_generate_twice_conflicts(self, client: AsyncClient, saved_tournament):
        url = f"/api/v1/tournaments/{saved_tournament.id}/schedule"
        await client.post(url, json={"seed": 1})
        response = await client.post(url, json={"seed": 1})
        assert response.status_code == 409

    async def test_filter_by_round(self, client: AsyncClient, saved_tournament):
        url = f"/api/v1/tournaments/{saved_tournament.id}/schedule"
        await client.post(url, json={"seed": 1})

        response = await client.get(url, params={"round": 2})
        rounds = response.json()["rounds"]
        assert [r["round"] for r in rounds] == [2]

    async def test_regenerate_requires_name(self, client: AsyncClient, saved_tournament):
        url = f"/api/v1/tournaments/{saved_tournament.id}/schedule"
        await client.post(url, json={"seed": 1})

        response = await client.post(f"{url}/regenerate", json={"confirm_name": "wrong"})
        assert response.status_code == 400

        response = await client.post(
            f"{url}/regenerate", json={"confirm_name": "Border Trophy", "seed": 2},
        )
        assert response.status_code == 200
        assert response.json()["total_series"] == 6

    async def test_auto_mode_ignores_manual_draft(self, client: AsyncClient, saved_tournament):
        response = await client.post(
            f"/api/v1/tournaments/{saved_tournament.id}/schedule",
            json={"manual_draft": [{"team1_id": "ind", "team2_id": "ind", "match_count": 2}]},
        )
        assert response.status_code == 201

    async def test_schedule_not_found(self, client: AsyncClient):
        response = await client.post("/api/v1/tournaments/missing/schedule")
        assert response.status_code == 404
