# =============================================================================
# pr_reviewer/models/team.py
# =============================================================================
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from pr_reviewer.db.base import BaseModel

class Team(BaseModel):
    __tablename__ = "teams"

    team_name = Column(String(255), primary_key=True)

    # Relationships
    members = relationship("User", back_populates="team", order_by="User.user_id")

    def __repr__(self):
        return f"<Team {self.team_name}>"
