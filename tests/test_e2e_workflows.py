"""
End-to-end reviewer workflows through the HTTP API.
"""
import pytest
from fastapi import status


@pytest.mark.e2e
class TestReviewWorkflows:
    """Full lifecycles across teams, users and pull requests."""

    def test_open_review_merge_lifecycle(self, client, add_team, create_pr):
        add_team("backend", ["a", "b", "c"])

        created = create_pr("pr-1", "a", name="Add caching")
        assert created.status_code == status.HTTP_201_CREATED
        assert set(created.json()["pr"]["assigned_reviewers"]) == {"b", "c"}

        for reviewer in ("b", "c"):
            reviews = client.get("/users/getReview", params={"user_id": reviewer}).json()
            assert [pr["pull_request_id"] for pr in reviews["pull_requests"]] == ["pr-1"]

        first = client.post("/pullRequest/merge", json={"pull_request_id": "pr-1"})
        second = client.post("/pullRequest/merge", json={"pull_request_id": "pr-1"})
        assert first.json() == second.json()
        assert first.json()["pr"]["status"] == "MERGED"

        response = client.post("/pullRequest/reassign", json={
            "pull_request_id": "pr-1",
            "old_user_id": "b",
        })
        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["error"]["code"] == "PR_MERGED"

        reviews = client.get("/users/getReview", params={"user_id": "b"}).json()
        assert reviews["pull_requests"][0]["status"] == "MERGED"

    def test_solo_team_gets_no_reviewers(self, client, add_team, create_pr):
        add_team("solo", ["a"])

        response = create_pr("pr-1", "a")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["pr"]["assigned_reviewers"] == []
        stats = client.get("/stats/system").json()["system_stats"]
        assert stats["total_reviews"] == 0

    def test_exhausted_team_keeps_assignment(self, client, add_team, create_pr):
        add_team("backend", ["a", "b", "c"])
        create_pr("pr-1", "a")

        response = client.post("/pullRequest/reassign", json={
            "pull_request_id": "pr-1",
            "old_user_id": "b",
        })
        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["error"]["code"] == "NO_CANDIDATE"

        reviews = client.get("/users/getReview", params={"user_id": "b"}).json()
        assert [pr["pull_request_id"] for pr in reviews["pull_requests"]] == ["pr-1"]

    def test_deactivated_reviewer_handed_off(self, client, add_team, create_pr):
        add_team("backend", ["a", "b", "c", "d"])
        assigned = create_pr("pr-1", "a").json()["pr"]["assigned_reviewers"]
        leaving = assigned[0]
        spare = ({"b", "c", "d"} - set(assigned)).pop()

        client.post("/users/setIsActive", json={"user_id": leaving, "is_active": False})
        response = client.post("/pullRequest/reassign", json={
            "pull_request_id": "pr-1",
            "old_user_id": leaving,
        })

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["replaced_by"] == spare
        reviews = client.get("/users/getReview", params={"user_id": leaving}).json()
        assert reviews["pull_requests"] == []

        stats = {row["user_id"]: row for row in client.get("/stats/users").json()["user_stats"]}
        assert stats[leaving]["reviews_count"] == 0
        assert stats[leaving]["is_active"] is False
        assert stats[spare]["reviews_count"] == 1
