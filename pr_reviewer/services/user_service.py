# =============================================================================
# pr_reviewer/services/user_service.py
# =============================================================================
from typing import List
from sqlalchemy.orm import Session
from pr_reviewer.models.user import User
from pr_reviewer.models.pull_request import PullRequest, PullRequestReviewer
from pr_reviewer.core.exceptions import NotFoundError
from pr_reviewer.core.logger import get_module_logger

logger = get_module_logger(__name__, "user_service.log")

class UserService:
    @staticmethod
    def get_user_by_id(db: Session, user_id: str) -> User:
        """Get user by id or raise NotFoundError"""
        user = db.get(User, user_id)
        if user is None:
            logger.warning(f"User {user_id} not found")
            raise NotFoundError(f"user {user_id} not found")
        return user

    @staticmethod
    def set_is_active(db: Session, user_id: str, is_active: bool) -> User:
        """Flip reviewer eligibility; existing assignments are left alone"""
        try:
            user = UserService.get_user_by_id(db, user_id)
            user.is_active = is_active
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(user)
        logger.info(f"User {user_id} is_active set to {is_active}")
        return user

    @staticmethod
    def get_review_assignments(db: Session, user_id: str) -> List[PullRequest]:
        """Pull requests the user is assigned to review, oldest first"""
        UserService.get_user_by_id(db, user_id)
        pull_requests = (
            db.query(PullRequest)
            .join(PullRequestReviewer, PullRequestReviewer.pull_request_id == PullRequest.pull_request_id)
            .filter(PullRequestReviewer.reviewer_id == user_id)
            .order_by(PullRequest.created_at, PullRequest.pull_request_id)
            .all()
        )
        logger.info(f"User {user_id} has {len(pull_requests)} review assignments")
        return pull_requests
