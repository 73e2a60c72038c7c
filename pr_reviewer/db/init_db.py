# =============================================================================
# pr_reviewer/db/init_db.py
# =============================================================================
from pr_reviewer.db.base import Base
from pr_reviewer.db.session import Database
from pr_reviewer.core.logger import get_module_logger

# Register every table with Base.metadata
from pr_reviewer.models.team import Team  # noqa: F401
from pr_reviewer.models.user import User  # noqa: F401
from pr_reviewer.models.pull_request import PullRequest, PullRequestReviewer  # noqa: F401

logger = get_module_logger(__name__, "database.log")

def init_db(database: Database, reset: bool = False):
    """
    Create tables and indexes that do not exist yet.

    With ``reset`` all four tables are dropped first.
    """
    if reset:
        logger.warning("RESET_DB_ON_STARTUP is set, dropping all tables")
        Base.metadata.drop_all(bind=database.engine)
        logger.info("Database reset completed")
    Base.metadata.create_all(bind=database.engine)
