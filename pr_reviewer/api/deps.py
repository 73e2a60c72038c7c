# =============================================================================
# pr_reviewer/api/deps.py
# =============================================================================
from fastapi import Depends
from sqlalchemy.orm import Session
from pr_reviewer.db.session import get_db
from pr_reviewer.services.pull_request_service import PullRequestService

def get_pull_request_service(db: Session = Depends(get_db)) -> PullRequestService:
    """Workflow engine bound to the request's session"""
    return PullRequestService(db)
