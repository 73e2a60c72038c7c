# =============================================================================
# pr_reviewer/models/user.py
# =============================================================================
from sqlalchemy import Column, String, Boolean, ForeignKey, Index
from sqlalchemy.orm import relationship
from pr_reviewer.db.base import BaseModel

class User(BaseModel):
    __tablename__ = "users"
    __table_args__ = (
        Index("idx_users_team_active", "team_name", "is_active"),
        Index("idx_users_active", "is_active"),
    )

    user_id = Column(String(255), primary_key=True)
    username = Column(String(255), nullable=False)
    team_name = Column(String(255), ForeignKey("teams.team_name", ondelete="CASCADE"), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    # Relationships
    team = relationship("Team", back_populates="members")
    authored_pull_requests = relationship("PullRequest", back_populates="author")
    review_assignments = relationship(
        "PullRequestReviewer",
        back_populates="reviewer",
        foreign_keys="PullRequestReviewer.reviewer_id",
    )

    def __repr__(self):
        return f"<User {self.user_id} team={self.team_name} active={self.is_active}>"
