"""
Test configuration and fixtures.

Everything runs against in-memory SQLite. DATABASE_URL is set before the
application is imported so the app lifespan builds a fresh in-memory
database for every TestClient.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("DB_CONNECT_ATTEMPTS", "1")
os.environ.setdefault("DB_CONNECT_BACKOFF_SECONDS", "0")
os.environ.setdefault("RESET_DB_ON_STARTUP", "false")

import pytest

from pr_reviewer.db.session import Database
from pr_reviewer.db.init_db import init_db
from pr_reviewer.models.team import Team
from pr_reviewer.models.user import User
from pr_reviewer.services.pull_request_service import PullRequestService


@pytest.fixture(scope="function")
def database():
    """A fresh in-memory database with the schema created."""
    db = Database("sqlite://")
    init_db(db)
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture(scope="function")
def db_session(database):
    """Session bound to the per-test database."""
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def pr_service(db_session):
    return PullRequestService(db_session)


@pytest.fixture
def make_team(db_session):
    """Insert a team directly: make_team("backend", [("u1", True), ("u2", False)])."""
    def _make_team(team_name, members):
        db_session.add(Team(team_name=team_name))
        for user_id, is_active in members:
            db_session.add(User(
                user_id=user_id,
                username=f"User {user_id}",
                team_name=team_name,
                is_active=is_active,
            ))
        db_session.commit()
    return _make_team


@pytest.fixture(scope="function")
def client():
    """Test client; entering it runs the lifespan and creates the schema."""
    from fastapi.testclient import TestClient
    from pr_reviewer.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api_session(client):
    """Session on the same database the client's app is using."""
    from pr_reviewer.main import app

    session = app.state.database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def add_team(client):
    """POST /team/add: add_team("backend", ["u1", "u2"], inactive=["u2"])."""
    def _add_team(team_name, user_ids, inactive=()):
        response = client.post("/team/add", json={
            "team_name": team_name,
            "members": [
                {"user_id": uid, "username": f"User {uid}", "is_active": uid not in inactive}
                for uid in user_ids
            ],
        })
        assert response.status_code == 201, response.text
        return response.json()["team"]
    return _add_team


@pytest.fixture
def create_pr(client):
    def _create_pr(pull_request_id, author_id, name=None):
        return client.post("/pullRequest/create", json={
            "pull_request_id": pull_request_id,
            "pull_request_name": name or f"Change {pull_request_id}",
            "author_id": author_id,
        })
    return _create_pr
