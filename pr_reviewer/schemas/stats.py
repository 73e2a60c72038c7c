# =============================================================================
# pr_reviewer/schemas/stats.py
# =============================================================================
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel

class SystemStats(BaseModel):
    total_teams: int
    total_users: int
    total_prs: int
    total_open_prs: int
    total_merged_prs: int
    total_reviews: int
    avg_reviews_per_pr: float

class TopReviewer(BaseModel):
    user_id: str
    username: str
    count: int

class UserStats(BaseModel):
    user_id: str
    username: str
    team_name: Optional[str] = None
    is_active: bool
    prs_count: int
    reviews_count: int

class PRStats(BaseModel):
    pull_request_id: str
    pull_request_name: str
    author_id: str
    author_name: Optional[str] = None
    status: str
    reviewers_count: int
    created_at: datetime
    merged_at: Optional[datetime] = None

class StatsResponse(BaseModel):
    """Every /stats endpoint fills only the sections it reports on"""
    system_stats: Optional[SystemStats] = None
    top_reviewers: Optional[List[TopReviewer]] = None
    user_stats: Optional[List[UserStats]] = None
    pr_stats: Optional[List[PRStats]] = None
