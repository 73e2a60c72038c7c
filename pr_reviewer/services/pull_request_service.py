# =============================================================================
# pr_reviewer/services/pull_request_service.py
# =============================================================================
"""
Pull request workflow: creation with initial reviewer assignment, merge and
reviewer reassignment.

Every public method runs as one transaction on the injected session and
rolls it back on any error, so a failed call never leaves partial rows.
Candidate reviewers are picked with a plain LIMIT and no ORDER BY: callers
get "some eligible teammates", not a ranked choice.
"""
from typing import List, Optional, Tuple
from sqlalchemy import select, update, exists
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from pr_reviewer.db.base import utc_now
from pr_reviewer.models.user import User
from pr_reviewer.models.pull_request import PullRequest, PullRequestReviewer, PRStatus
from pr_reviewer.core.exceptions import (
    PRExistsError,
    NotFoundError,
    PRMergedError,
    NotAssignedError,
    NoCandidateError,
)
from pr_reviewer.core.logger import get_module_logger

logger = get_module_logger(__name__, "pull_request_service.log")

MAX_INITIAL_REVIEWERS = 2

class PullRequestService:
    """Workflow engine for pull request state transitions"""

    def __init__(self, db: Session):
        self.db = db

    # -------------------------------------------------------------------------
    # Queries shared by the transitions
    # -------------------------------------------------------------------------

    def _get_pull_request(self, pull_request_id: str) -> Optional[PullRequest]:
        return self.db.get(PullRequest, pull_request_id)

    def _pull_request_exists(self, pull_request_id: str) -> bool:
        return self.db.scalar(
            select(exists().where(PullRequest.pull_request_id == pull_request_id))
        )

    def _is_assigned(self, pull_request_id: str, user_id: str) -> bool:
        return self.db.scalar(
            select(
                exists().where(
                    PullRequestReviewer.pull_request_id == pull_request_id,
                    PullRequestReviewer.reviewer_id == user_id,
                )
            )
        )

    def _find_candidates(
        self,
        team_name: Optional[str],
        author_id: str,
        limit: int,
        exclude_assigned_to: Optional[str] = None,
    ) -> List[str]:
        """
        Active teammates of the author, author excluded.

        With ``exclude_assigned_to`` users already reviewing that PR are
        skipped as well.
        """
        if team_name is None:
            return []

        query = select(User.user_id).where(
            User.team_name == team_name,
            User.user_id != author_id,
            User.is_active.is_(True),
        )
        if exclude_assigned_to is not None:
            assigned = select(PullRequestReviewer.reviewer_id).where(
                PullRequestReviewer.pull_request_id == exclude_assigned_to
            )
            query = query.where(User.user_id.not_in(assigned))

        return list(self.db.scalars(query.limit(limit)).all())

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def create_pull_request(
        self,
        pull_request_id: str,
        pull_request_name: str,
        author_id: str,
    ) -> PullRequest:
        """
        Create an OPEN pull request and assign up to two reviewers from the
        author's team.
        """
        try:
            if self._pull_request_exists(pull_request_id):
                logger.warning(f"Pull request {pull_request_id} already exists")
                raise PRExistsError()

            author = self.db.get(User, author_id)
            if author is None:
                logger.warning(f"Author {author_id} not found for pull request {pull_request_id}")
                raise NotFoundError(f"author {author_id} not found")

            pull_request = PullRequest(
                pull_request_id=pull_request_id,
                pull_request_name=pull_request_name,
                author_id=author_id,
                status=PRStatus.OPEN.value,
            )
            self.db.add(pull_request)
            self.db.flush()

            reviewer_ids = self._find_candidates(author.team_name, author_id, MAX_INITIAL_REVIEWERS)
            for reviewer_id in reviewer_ids:
                pull_request.reviewers.append(PullRequestReviewer(reviewer_id=reviewer_id))

            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # A concurrent insert of the same id won the race
            if self._pull_request_exists(pull_request_id):
                logger.warning(f"Pull request {pull_request_id} inserted concurrently")
                raise PRExistsError()
            logger.error(f"Integrity error creating pull request {pull_request_id}: {str(e)}")
            raise
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(pull_request)
        logger.info(
            f"Created pull request {pull_request_id} by {author_id} "
            f"with reviewers {pull_request.assigned_reviewers}"
        )
        return pull_request

    def merge_pull_request(self, pull_request_id: str) -> PullRequest:
        """Mark a pull request MERGED; merging a merged one returns it as is"""
        try:
            pull_request = self._get_pull_request(pull_request_id)
            if pull_request is None:
                logger.warning(f"Merge requested for unknown pull request {pull_request_id}")
                raise NotFoundError(f"pull request {pull_request_id} not found")

            if pull_request.is_merged:
                logger.info(f"Pull request {pull_request_id} already merged")
                self.db.commit()
                return pull_request

            pull_request.status = PRStatus.MERGED.value
            pull_request.merged_at = utc_now()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(pull_request)
        logger.info(f"Merged pull request {pull_request_id}")
        return pull_request

    def reassign_reviewer(self, pull_request_id: str, old_user_id: str) -> Tuple[PullRequest, str]:
        """
        Swap ``old_user_id`` for another eligible teammate of the author.

        Returns the updated pull request and the id of the new reviewer.
        """
        try:
            pull_request = self._get_pull_request(pull_request_id)
            if pull_request is None:
                logger.warning(f"Reassign requested for unknown pull request {pull_request_id}")
                raise NotFoundError(f"pull request {pull_request_id} not found")

            if pull_request.is_merged:
                logger.warning(f"Reassign rejected, pull request {pull_request_id} is merged")
                raise PRMergedError()

            if not self._is_assigned(pull_request_id, old_user_id):
                logger.warning(f"{old_user_id} is not a reviewer of {pull_request_id}")
                raise NotAssignedError()

            author = pull_request.author
            candidates = self._find_candidates(
                author.team_name,
                author.user_id,
                limit=1,
                exclude_assigned_to=pull_request_id,
            )
            if not candidates:
                logger.warning(f"No replacement candidate for {old_user_id} on {pull_request_id}")
                raise NoCandidateError()
            new_user_id = candidates[0]

            # Same slot, new reviewer
            self.db.execute(
                update(PullRequestReviewer)
                .where(
                    PullRequestReviewer.pull_request_id == pull_request_id,
                    PullRequestReviewer.reviewer_id == old_user_id,
                )
                .values(reviewer_id=new_user_id, assigned_at=utc_now())
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(pull_request)
        logger.info(f"Reassigned {pull_request_id}: {old_user_id} -> {new_user_id}")
        return pull_request, new_user_id
