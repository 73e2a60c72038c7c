# =============================================================================
# pr_reviewer/schemas/team.py
# =============================================================================
from typing import List
from pydantic import BaseModel, ConfigDict, Field

class TeamMember(BaseModel):
    user_id: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1)
    is_active: bool

    model_config = ConfigDict(from_attributes=True)

class Team(BaseModel):
    """Used both as the create request and as the response body"""
    team_name: str = Field(..., min_length=1)
    members: List[TeamMember] = []

class TeamCreateResponse(BaseModel):
    team: Team
