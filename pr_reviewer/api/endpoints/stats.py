# =============================================================================
# pr_reviewer/api/endpoints/stats.py
# =============================================================================
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from pr_reviewer.db.session import get_db
from pr_reviewer.services.stats_service import StatsService
from pr_reviewer.schemas.stats import StatsResponse
from pr_reviewer.core.exceptions import InternalError
from pr_reviewer.core.logger import get_module_logger

logger = get_module_logger(__name__, "stats.log")

router = APIRouter()

SYSTEM_TOP_REVIEWERS = 5
DEFAULT_TOP_REVIEWERS = 10
MAX_TOP_REVIEWERS = 50

def clamp_limit(raw: Optional[str]) -> int:
    """Missing, non-numeric and non-positive limits fall back to the default; large ones are capped"""
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_TOP_REVIEWERS
    if limit <= 0:
        return DEFAULT_TOP_REVIEWERS
    return min(limit, MAX_TOP_REVIEWERS)

@router.get(
    "/system",
    response_model=StatsResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def get_system_stats(db: Session = Depends(get_db)):
    """
    Totals across the system plus the top 5 reviewers
    """
    try:
        return StatsResponse(
            system_stats=StatsService.get_system_stats(db),
            top_reviewers=StatsService.get_top_reviewers(db, SYSTEM_TOP_REVIEWERS),
        )
    except Exception as e:
        logger.error(f"Error getting system stats: {str(e)}", exc_info=True)
        raise InternalError(str(e))

@router.get(
    "/users",
    response_model=StatsResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def get_user_stats(db: Session = Depends(get_db)):
    """
    Authored and reviewed pull request counts per user
    """
    try:
        return StatsResponse(user_stats=StatsService.get_user_stats(db))
    except Exception as e:
        logger.error(f"Error getting user stats: {str(e)}", exc_info=True)
        raise InternalError(str(e))

@router.get(
    "/prs",
    response_model=StatsResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def get_pr_stats(db: Session = Depends(get_db)):
    """
    Reviewer counts per pull request, newest first
    """
    try:
        return StatsResponse(pr_stats=StatsService.get_pr_stats(db))
    except Exception as e:
        logger.error(f"Error getting PR stats: {str(e)}", exc_info=True)
        raise InternalError(str(e))

@router.get(
    "/top-reviewers",
    response_model=StatsResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def get_top_reviewers(
    limit: Optional[str] = Query(None, description="Number of reviewers to return (max 50)"),
    db: Session = Depends(get_db)
):
    """
    Users with the most review assignments
    """
    try:
        return StatsResponse(top_reviewers=StatsService.get_top_reviewers(db, clamp_limit(limit)))
    except Exception as e:
        logger.error(f"Error getting top reviewers: {str(e)}", exc_info=True)
        raise InternalError(str(e))
