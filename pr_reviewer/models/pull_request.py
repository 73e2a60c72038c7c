# =============================================================================
# pr_reviewer/models/pull_request.py
# =============================================================================
import enum
from sqlalchemy import (
    Column, String, DateTime, ForeignKey, ForeignKeyConstraint,
    CheckConstraint, UniqueConstraint, Index,
)
from sqlalchemy.orm import relationship
from pr_reviewer.db.base import Base, BaseModel, utc_now

class PRStatus(str, enum.Enum):
    OPEN = "OPEN"
    MERGED = "MERGED"

class PullRequestReviewer(Base):
    """One reviewer slot on a pull request"""
    __tablename__ = "pr_reviewers"
    __table_args__ = (
        ForeignKeyConstraint(
            ["pull_request_id", "author_id"],
            ["pull_requests.pull_request_id", "pull_requests.author_id"],
            ondelete="CASCADE",
            name="fk_pr_reviewers_pull_request",
        ),
        CheckConstraint("reviewer_id <> author_id", name="ck_pr_reviewers_not_author"),
        Index("idx_reviewers_pr_id", "pull_request_id"),
        Index("idx_reviewers_user_id", "reviewer_id"),
    )

    pull_request_id = Column(String(255), primary_key=True)
    reviewer_id = Column(String(255), ForeignKey("users.user_id"), primary_key=True)
    # Copy of the PR author, filled from the parent row via the composite FK
    author_id = Column(String(255), nullable=False)
    assigned_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    # Relationships
    pull_request = relationship("PullRequest", back_populates="reviewers")
    reviewer = relationship("User", back_populates="review_assignments", foreign_keys=[reviewer_id])

    def __repr__(self):
        return f"<PullRequestReviewer {self.pull_request_id} -> {self.reviewer_id}>"

class PullRequest(BaseModel):
    __tablename__ = "pull_requests"
    __table_args__ = (
        # Target of the composite FK from pr_reviewers
        UniqueConstraint("pull_request_id", "author_id", name="uq_pull_requests_id_author"),
        CheckConstraint("status IN ('OPEN', 'MERGED')", name="ck_pull_requests_status"),
        Index("idx_pr_status", "status"),
        Index("idx_pr_author", "author_id"),
    )

    pull_request_id = Column(String(255), primary_key=True)
    pull_request_name = Column(String(255), nullable=False)
    author_id = Column(String(255), ForeignKey("users.user_id"), nullable=False)
    status = Column(String(20), default=PRStatus.OPEN.value, nullable=False)
    merged_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    author = relationship("User", back_populates="authored_pull_requests")
    reviewers = relationship(
        PullRequestReviewer,
        back_populates="pull_request",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=[PullRequestReviewer.assigned_at, PullRequestReviewer.reviewer_id],
    )

    @property
    def is_merged(self) -> bool:
        return self.status == PRStatus.MERGED.value

    @property
    def assigned_reviewers(self):
        return [r.reviewer_id for r in self.reviewers]

    def __repr__(self):
        return f"<PullRequest {self.pull_request_id} status={self.status}>"
