# =============================================================================
# pr_reviewer/schemas/user.py
# =============================================================================
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pr_reviewer.schemas.pull_request import PullRequestShort

class UserResponse(BaseModel):
    user_id: str
    username: str
    team_name: Optional[str] = None
    is_active: bool

    model_config = ConfigDict(from_attributes=True)

class SetIsActiveRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    is_active: bool

class UserUpdateResponse(BaseModel):
    user: UserResponse

class UserReviewsResponse(BaseModel):
    """Pull requests a user is assigned to review"""
    user_id: str
    pull_requests: List[PullRequestShort]
