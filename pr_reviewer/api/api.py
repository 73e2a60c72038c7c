# =============================================================================
# pr_reviewer/api/api.py
# =============================================================================
from fastapi import APIRouter
from pr_reviewer.api.endpoints import teams, users, pull_requests, stats

api_router = APIRouter()

api_router.include_router(teams.router, prefix="/team", tags=["Teams"])
api_router.include_router(users.router, prefix="/users", tags=["Users"])
api_router.include_router(pull_requests.router, prefix="/pullRequest", tags=["Pull Requests"])
api_router.include_router(stats.router, prefix="/stats", tags=["Statistics"])
