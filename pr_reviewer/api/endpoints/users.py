# =============================================================================
# pr_reviewer/api/endpoints/users.py
# =============================================================================
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from pr_reviewer.db.session import get_db
from pr_reviewer.services.user_service import UserService
from pr_reviewer.schemas.user import (
    SetIsActiveRequest,
    UserResponse,
    UserUpdateResponse,
    UserReviewsResponse,
)
from pr_reviewer.schemas.pull_request import PullRequestShort
from pr_reviewer.core.exceptions import ReviewServiceError, InternalError
from pr_reviewer.core.logger import get_module_logger

logger = get_module_logger(__name__, "users.log")

router = APIRouter()

@router.post("/setIsActive", response_model=UserUpdateResponse, status_code=status.HTTP_200_OK)
def set_is_active(request: SetIsActiveRequest, db: Session = Depends(get_db)):
    """Set a user's reviewer eligibility flag"""
    try:
        user = UserService.set_is_active(db, request.user_id, request.is_active)
        return UserUpdateResponse(user=UserResponse.model_validate(user))
    except ReviewServiceError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error updating user {request.user_id}: {str(e)}", exc_info=True)
        raise InternalError(str(e))

@router.get("/getReview", response_model=UserReviewsResponse, status_code=status.HTTP_200_OK)
def get_review(
    user_id: str = Query(..., min_length=1, description="Reviewer id"),
    db: Session = Depends(get_db)
):
    """Pull requests the user is assigned to review"""
    try:
        pull_requests = UserService.get_review_assignments(db, user_id)
        return UserReviewsResponse(
            user_id=user_id,
            pull_requests=[PullRequestShort.model_validate(pr) for pr in pull_requests],
        )
    except ReviewServiceError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error getting reviews for {user_id}: {str(e)}", exc_info=True)
        raise InternalError(str(e))
