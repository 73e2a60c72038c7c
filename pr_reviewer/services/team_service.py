# =============================================================================
# pr_reviewer/services/team_service.py
# =============================================================================
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from pr_reviewer.models.team import Team
from pr_reviewer.models.user import User
from pr_reviewer.schemas.team import Team as TeamSchema, TeamMember
from pr_reviewer.core.exceptions import TeamExistsError, NotFoundError
from pr_reviewer.core.logger import get_module_logger

logger = get_module_logger(__name__, "team_service.log")

class TeamService:
    @staticmethod
    def create_team(db: Session, team_name: str, members: List[TeamMember]) -> TeamSchema:
        """
        Create a team and upsert its members by user_id.

        Existing users are rebound to this team and get the given username
        and activity flag, even when they belonged to another team.
        """
        try:
            if db.get(Team, team_name) is not None:
                logger.warning(f"Team {team_name} already exists")
                raise TeamExistsError()

            db.add(Team(team_name=team_name))
            db.flush()

            for member in members:
                user = db.get(User, member.user_id)
                if user is None:
                    db.add(User(
                        user_id=member.user_id,
                        username=member.username,
                        team_name=team_name,
                        is_active=member.is_active,
                    ))
                    # Repeated ids later in the list must see this row
                    db.flush()
                    continue

                if user.team_name and user.team_name != team_name:
                    logger.warning(
                        f"Moving user {user.user_id} from team {user.team_name} to {team_name}"
                    )
                user.username = member.username
                user.team_name = team_name
                user.is_active = member.is_active

            db.commit()
        except IntegrityError as e:
            db.rollback()
            if db.get(Team, team_name) is not None:
                logger.warning(f"Team {team_name} created concurrently")
                raise TeamExistsError()
            logger.error(f"Integrity error creating team {team_name}: {str(e)}")
            raise
        except Exception:
            db.rollback()
            raise

        logger.info(f"Team {team_name} created with {len(members)} members")
        return TeamSchema(team_name=team_name, members=members)

    @staticmethod
    def get_team(db: Session, team_name: str) -> TeamSchema:
        """Team with its members; a team without members counts as missing"""
        users = db.query(User).filter(User.team_name == team_name).order_by(User.user_id).all()
        if not users:
            logger.warning(f"Team {team_name} not found or has no members")
            raise NotFoundError(f"team {team_name} not found")

        return TeamSchema(
            team_name=team_name,
            members=[TeamMember.model_validate(u) for u in users],
        )
