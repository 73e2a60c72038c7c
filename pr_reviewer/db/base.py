# =============================================================================
# pr_reviewer/db/base.py
# =============================================================================
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime
from sqlalchemy.orm import declarative_base

Base = declarative_base()

def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)

class BaseModel(Base):
    """Abstract base: natural primary keys are declared per table"""
    __abstract__ = True

    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
