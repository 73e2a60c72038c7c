"""
HTTP tests for /stats.
"""
import pytest
from fastapi import status

from pr_reviewer.api.endpoints.stats import clamp_limit


@pytest.mark.unit
class TestClampLimit:

    @pytest.mark.parametrize("requested, expected", [
        (0, 10),
        (-3, 10),
        (1, 1),
        (25, 25),
        (50, 50),
        (51, 50),
        (1000, 50),
        ("7", 7),
        ("many", 10),
        ("2.5", 10),
        ("", 10),
        (None, 10),
    ])
    def test_clamp(self, requested, expected):
        assert clamp_limit(requested) == expected


@pytest.mark.unit
class TestStatsEndpoints:
    """Response shapes and values of the reporting endpoints."""

    def test_system_stats_shape(self, client, add_team, create_pr):
        add_team("backend", ["a", "b", "c"])
        create_pr("pr-1", "a")

        response = client.get("/stats/system")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert set(body) == {"system_stats", "top_reviewers"}
        assert body["system_stats"]["total_prs"] == 1
        assert body["system_stats"]["total_reviews"] == 2
        assert body["system_stats"]["avg_reviews_per_pr"] == 2.0
        assert len(body["top_reviewers"]) == 3

    def test_system_stats_top_five(self, client, add_team):
        add_team("big", [f"u{i}" for i in range(8)])

        body = client.get("/stats/system").json()

        assert len(body["top_reviewers"]) == 5

    def test_system_stats_empty(self, client):
        body = client.get("/stats/system").json()

        assert body["system_stats"]["total_prs"] == 0
        assert body["system_stats"]["avg_reviews_per_pr"] == 0.0

    def test_user_stats_shape(self, client, add_team, create_pr):
        add_team("backend", ["a", "b"])
        create_pr("pr-1", "a")

        body = client.get("/stats/users").json()

        assert set(body) == {"user_stats"}
        assert body["user_stats"][0] == {
            "user_id": "b",
            "username": "User b",
            "team_name": "backend",
            "is_active": True,
            "prs_count": 0,
            "reviews_count": 1,
        }

    def test_pr_stats_shape(self, client, add_team, create_pr):
        add_team("backend", ["a", "b"])
        create_pr("pr-1", "a", name="Feature")

        body = client.get("/stats/prs").json()

        assert set(body) == {"pr_stats"}
        row = body["pr_stats"][0]
        assert row["pull_request_id"] == "pr-1"
        assert row["author_name"] == "User a"
        assert row["reviewers_count"] == 1
        assert "merged_at" not in row

    def test_top_reviewers_default_and_clamp(self, client, add_team):
        add_team("big", [f"u{i:02d}" for i in range(60)])

        default = client.get("/stats/top-reviewers").json()
        capped = client.get("/stats/top-reviewers", params={"limit": 500}).json()
        fallback = client.get("/stats/top-reviewers", params={"limit": 0}).json()
        small = client.get("/stats/top-reviewers", params={"limit": 3}).json()

        assert set(default) == {"top_reviewers"}
        assert len(default["top_reviewers"]) == 10
        assert len(capped["top_reviewers"]) == 50
        assert len(fallback["top_reviewers"]) == 10
        assert len(small["top_reviewers"]) == 3

    def test_top_reviewers_non_numeric_limit_uses_default(self, client, add_team):
        add_team("big", [f"u{i:02d}" for i in range(15)])

        response = client.get("/stats/top-reviewers", params={"limit": "many"})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()["top_reviewers"]) == 10
