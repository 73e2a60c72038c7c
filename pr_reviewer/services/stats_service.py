# =============================================================================
# pr_reviewer/services/stats_service.py
# =============================================================================
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import func, desc, asc

from pr_reviewer.models.team import Team
from pr_reviewer.models.user import User
from pr_reviewer.models.pull_request import PullRequest, PullRequestReviewer, PRStatus
from pr_reviewer.schemas.stats import SystemStats, TopReviewer, UserStats, PRStats
from pr_reviewer.core.logger import get_module_logger

logger = get_module_logger(__name__, "stats_service.log")

class StatsService:
    """
    Read-only aggregates over teams, users and pull requests.

    Each metric is its own query; a report is not a consistent snapshot
    under concurrent writes.
    """

    @staticmethod
    def get_system_stats(db: Session) -> SystemStats:
        total_teams = db.query(func.count(Team.team_name)).scalar()
        total_users = db.query(func.count(User.user_id)).scalar()
        total_prs = db.query(func.count(PullRequest.pull_request_id)).scalar()
        total_open_prs = db.query(func.count(PullRequest.pull_request_id)).filter(
            PullRequest.status == PRStatus.OPEN.value
        ).scalar()
        total_merged_prs = db.query(func.count(PullRequest.pull_request_id)).filter(
            PullRequest.status == PRStatus.MERGED.value
        ).scalar()
        total_reviews = db.query(func.count()).select_from(PullRequestReviewer).scalar()

        avg_reviews_per_pr = total_reviews / total_prs if total_prs > 0 else 0.0

        logger.info(f"System stats: prs={total_prs}, reviews={total_reviews}")
        return SystemStats(
            total_teams=total_teams,
            total_users=total_users,
            total_prs=total_prs,
            total_open_prs=total_open_prs,
            total_merged_prs=total_merged_prs,
            total_reviews=total_reviews,
            avg_reviews_per_pr=avg_reviews_per_pr,
        )

    @staticmethod
    def get_top_reviewers(db: Session, limit: int) -> List[TopReviewer]:
        """Users by number of review assignments, zero-count users included"""
        review_count = func.count(PullRequestReviewer.reviewer_id).label("review_count")
        rows = db.query(
            User.user_id,
            User.username,
            review_count,
        ).select_from(
            User
        ).outerjoin(
            PullRequestReviewer, PullRequestReviewer.reviewer_id == User.user_id
        ).group_by(
            User.user_id, User.username
        ).order_by(
            desc("review_count"), asc(User.user_id)
        ).limit(limit).all()

        return [
            TopReviewer(user_id=row.user_id, username=row.username, count=row.review_count)
            for row in rows
        ]

    @staticmethod
    def get_user_stats(db: Session) -> List[UserStats]:
        prs_count = func.count(func.distinct(PullRequest.pull_request_id)).label("prs_count")
        reviews_count = func.count(func.distinct(PullRequestReviewer.pull_request_id)).label("reviews_count")

        rows = db.query(
            User.user_id,
            User.username,
            User.team_name,
            User.is_active,
            prs_count,
            reviews_count,
        ).select_from(
            User
        ).outerjoin(
            PullRequest, PullRequest.author_id == User.user_id
        ).outerjoin(
            PullRequestReviewer, PullRequestReviewer.reviewer_id == User.user_id
        ).group_by(
            User.user_id, User.username, User.team_name, User.is_active
        ).order_by(
            desc("reviews_count"), desc("prs_count"), asc(User.user_id)
        ).all()

        return [
            UserStats(
                user_id=row.user_id,
                username=row.username,
                team_name=row.team_name,
                is_active=row.is_active,
                prs_count=row.prs_count,
                reviews_count=row.reviews_count,
            )
            for row in rows
        ]

    @staticmethod
    def get_pr_stats(db: Session) -> List[PRStats]:
        reviewers_count = func.count(PullRequestReviewer.reviewer_id).label("reviewers_count")

        rows = db.query(
            PullRequest.pull_request_id,
            PullRequest.pull_request_name,
            PullRequest.author_id,
            User.username.label("author_name"),
            PullRequest.status,
            reviewers_count,
            PullRequest.created_at,
            PullRequest.merged_at,
        ).select_from(
            PullRequest
        ).outerjoin(
            User, User.user_id == PullRequest.author_id
        ).outerjoin(
            PullRequestReviewer, PullRequestReviewer.pull_request_id == PullRequest.pull_request_id
        ).group_by(
            PullRequest.pull_request_id,
            PullRequest.pull_request_name,
            PullRequest.author_id,
            User.username,
            PullRequest.status,
            PullRequest.created_at,
            PullRequest.merged_at,
        ).order_by(
            desc(PullRequest.created_at), asc(PullRequest.pull_request_id)
        ).all()

        return [
            PRStats(
                pull_request_id=row.pull_request_id,
                pull_request_name=row.pull_request_name,
                author_id=row.author_id,
                author_name=row.author_name,
                status=row.status,
                reviewers_count=row.reviewers_count,
                created_at=row.created_at,
                merged_at=row.merged_at,
            )
            for row in rows
        ]
