# =============================================================================
# pr_reviewer/core/exceptions.py
# =============================================================================
"""
Domain errors raised by the service layer.

Each error carries an ``ErrorCode``; translating codes to HTTP statuses is
the API layer's job (see ``pr_reviewer.api.errors``).
"""
from typing import Optional
from pr_reviewer.schemas.error import ErrorCode

class ReviewServiceError(Exception):
    """Base class for all errors surfaced to API clients"""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR
    default_message: str = "internal error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

class TeamExistsError(ReviewServiceError):
    code = ErrorCode.TEAM_EXISTS
    default_message = "team_name already exists"

class PRExistsError(ReviewServiceError):
    code = ErrorCode.PR_EXISTS
    default_message = "PR id already exists"

class NotFoundError(ReviewServiceError):
    code = ErrorCode.NOT_FOUND
    default_message = "resource not found"

class PRMergedError(ReviewServiceError):
    code = ErrorCode.PR_MERGED
    default_message = "cannot reassign on merged PR"

class NotAssignedError(ReviewServiceError):
    code = ErrorCode.NOT_ASSIGNED
    default_message = "reviewer is not assigned to this PR"

class NoCandidateError(ReviewServiceError):
    code = ErrorCode.NO_CANDIDATE
    default_message = "no active replacement candidate in team"

class InternalError(ReviewServiceError):
    code = ErrorCode.INTERNAL_ERROR
