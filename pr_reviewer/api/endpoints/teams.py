# =============================================================================
# pr_reviewer/api/endpoints/teams.py
# =============================================================================
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from pr_reviewer.db.session import get_db
from pr_reviewer.services.team_service import TeamService
from pr_reviewer.schemas.team import Team, TeamCreateResponse
from pr_reviewer.core.exceptions import ReviewServiceError, InternalError
from pr_reviewer.core.logger import get_module_logger

logger = get_module_logger(__name__, "teams.log")

router = APIRouter()

@router.post("/add", response_model=TeamCreateResponse, status_code=status.HTTP_201_CREATED)
def add_team(team: Team, db: Session = Depends(get_db)):
    """
    Create a team; members are created or updated and bound to it
    """
    try:
        logger.info(f"Creating team {team.team_name} with {len(team.members)} members")
        created = TeamService.create_team(db, team.team_name, team.members)
        return TeamCreateResponse(team=created)
    except ReviewServiceError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error creating team {team.team_name}: {str(e)}", exc_info=True)
        raise InternalError(str(e))

@router.get("/get", response_model=Team, status_code=status.HTTP_200_OK)
def get_team(
    team_name: str = Query(..., min_length=1, description="Team name"),
    db: Session = Depends(get_db)
):
    """
    Get a team with its members
    """
    try:
        return TeamService.get_team(db, team_name)
    except ReviewServiceError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error getting team {team_name}: {str(e)}", exc_info=True)
        raise InternalError(str(e))
