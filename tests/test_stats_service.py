"""
Tests for the statistics queries.
"""
import pytest

from pr_reviewer.services.stats_service import StatsService


@pytest.mark.unit
class TestSystemStats:
    """System-wide totals."""

    def test_empty_system(self, db_session):
        stats = StatsService.get_system_stats(db_session)

        assert stats.total_teams == 0
        assert stats.total_users == 0
        assert stats.total_prs == 0
        assert stats.total_reviews == 0
        assert stats.avg_reviews_per_pr == 0.0

    def test_totals_and_average(self, db_session, make_team, pr_service):
        make_team("backend", [("a", True), ("b", True), ("c", True)])
        make_team("solo", [("s", True)])
        pr_service.create_pull_request("pr-1", "Two reviewers", "a")
        pr_service.create_pull_request("pr-2", "No reviewers", "s")
        pr_service.merge_pull_request("pr-2")

        stats = StatsService.get_system_stats(db_session)

        assert stats.total_teams == 2
        assert stats.total_users == 4
        assert stats.total_prs == 2
        assert stats.total_open_prs == 1
        assert stats.total_merged_prs == 1
        assert stats.total_reviews == 2
        assert stats.avg_reviews_per_pr == 1.0


@pytest.mark.unit
class TestTopReviewers:
    """Reviewer ranking."""

    def test_ranking_includes_zero_counts(self, db_session, make_team, pr_service):
        make_team("backend", [("a", True), ("b", True)])
        pr_service.create_pull_request("pr-1", "First", "a")
        pr_service.create_pull_request("pr-2", "Second", "a")
        pr_service.create_pull_request("pr-3", "Third", "b")

        top = StatsService.get_top_reviewers(db_session, 10)

        assert [(r.user_id, r.count) for r in top] == [("b", 2), ("a", 1)]
        assert top[0].username == "User b"

    def test_ties_break_by_user_id(self, db_session, make_team):
        make_team("backend", [("c", True), ("a", True), ("b", True)])

        top = StatsService.get_top_reviewers(db_session, 10)

        assert [r.user_id for r in top] == ["a", "b", "c"]
        assert all(r.count == 0 for r in top)

    def test_limit(self, db_session, make_team):
        make_team("backend", [("a", True), ("b", True), ("c", True)])

        assert len(StatsService.get_top_reviewers(db_session, 2)) == 2


@pytest.mark.unit
class TestUserAndPRStats:
    """Per-user and per-PR breakdowns."""

    def test_user_stats(self, db_session, make_team, pr_service):
        make_team("backend", [("a", True), ("b", False)])
        pr_service.create_pull_request("pr-1", "Before deactivation", "a")
        make_team("frontend", [("x", True)])

        stats = {row.user_id: row for row in StatsService.get_user_stats(db_session)}

        assert set(stats) == {"a", "b", "x"}
        assert (stats["a"].prs_count, stats["a"].reviews_count) == (1, 0)
        assert stats["a"].team_name == "backend"
        assert (stats["x"].prs_count, stats["x"].reviews_count) == (0, 0)

    def test_user_stats_count_distinct(self, db_session, make_team, pr_service):
        make_team("backend", [("a", True), ("b", True)])
        pr_service.create_pull_request("pr-1", "First", "a")
        pr_service.create_pull_request("pr-2", "Second", "a")
        pr_service.create_pull_request("pr-3", "Back", "b")

        stats = StatsService.get_user_stats(db_session)

        by_id = {row.user_id: row for row in stats}
        assert (by_id["a"].prs_count, by_id["a"].reviews_count) == (2, 1)
        assert (by_id["b"].prs_count, by_id["b"].reviews_count) == (1, 2)
        assert stats[0].user_id == "b"

    def test_pr_stats(self, db_session, make_team, pr_service):
        make_team("backend", [("a", True), ("b", True), ("c", True)])
        make_team("solo", [("s", True)])
        pr_service.create_pull_request("pr-1", "Reviewed", "a")
        pr_service.create_pull_request("pr-2", "Alone", "s")
        pr_service.merge_pull_request("pr-2")

        stats = {row.pull_request_id: row for row in StatsService.get_pr_stats(db_session)}

        assert stats["pr-1"].reviewers_count == 2
        assert stats["pr-1"].author_name == "User a"
        assert stats["pr-1"].status == "OPEN"
        assert stats["pr-1"].merged_at is None
        assert stats["pr-2"].reviewers_count == 0
        assert stats["pr-2"].status == "MERGED"
        assert stats["pr-2"].merged_at is not None

    def test_pr_stats_empty(self, db_session):
        assert StatsService.get_pr_stats(db_session) == []
