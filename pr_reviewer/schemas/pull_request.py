# =============================================================================
# pr_reviewer/schemas/pull_request.py
# =============================================================================
from datetime import datetime
from typing import List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

class PullRequestShort(BaseModel):
    pull_request_id: str
    pull_request_name: str
    author_id: str
    status: str

    model_config = ConfigDict(from_attributes=True)

class PullRequestResponse(PullRequestShort):
    assigned_reviewers: List[str] = []
    createdAt: Optional[datetime] = Field(None, validation_alias=AliasChoices("created_at", "createdAt"))
    mergedAt: Optional[datetime] = Field(None, validation_alias=AliasChoices("merged_at", "mergedAt"))

class PullRequestEnvelope(BaseModel):
    pr: PullRequestResponse

class CreatePRRequest(BaseModel):
    pull_request_id: str = Field(..., min_length=1)
    pull_request_name: str = Field(..., min_length=1)
    author_id: str = Field(..., min_length=1)

class MergePRRequest(BaseModel):
    pull_request_id: str = Field(..., min_length=1)

class ReassignRequest(BaseModel):
    pull_request_id: str = Field(..., min_length=1)
    old_user_id: str = Field(..., min_length=1)

class ReassignResponse(BaseModel):
    pr: PullRequestResponse
    replaced_by: str
