# tests/api/conftest.py
import pytest
from fastapi.testclient import TestClient

import resume_share.db as db
from resume_share.api.main import app
from resume_share.api.dependencies import get_db
from resume_share.api.security import create_access_token

TEST_JWT_SECRET = "test-secret-key-for-testing"


@pytest.fixture
def client(shared_db, monkeypatch):
    """
    TestClient that overrides dependencies so each request gets its own connection.
    """
    monkeypatch.setenv("JWT_SECRET", TEST_JWT_SECRET)

    def override_get_db():
        conn = db.connect(shared_db)
        try:
            yield conn
        finally:
            conn.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


def _headers_for(user_id: int, login: str) -> dict:
    token = create_access_token(
        secret=TEST_JWT_SECRET,
        user_id=user_id,
        github_login=login,
        expires_minutes=60,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(test_user_id):
    return _headers_for(test_user_id, "octocat")


@pytest.fixture
def other_user_headers(conn):
    user_id = db.get_or_create_user(conn, "hubot")
    return _headers_for(user_id, "hubot")


@pytest.fixture
def auth_headers_nonexistent_user():
    """Token for a user ID that doesn't exist in the database."""
    return _headers_for(999999, "nonexistent")


@pytest.fixture
def sample_resume():
    return {
        "info": {
            "name": "Mona Lisa",
            "email": "mona@example.com",
            "phone": "555-0100",
            "location": "San Francisco",
            "intention": "Backend Engineer",
        },
        "educations": [
            {
                "school": "State University",
                "major": "Computer Science",
                "education": "B.S.",
                "startTime": "2014-09",
                "endTime": "2018-06",
                "experiences": ["Teaching assistant for Algorithms"],
            }
        ],
        "workExperiences": [
            {
                "company": "Octo Corp",
                "position": "Software Engineer",
                "startTime": "2018-07",
                "endTime": "",
                "untilNow": True,
                "projects": [{"name": "Billing API", "details": ["Designed the invoice pipeline"]}],
            }
        ],
        "personalProjects": [
            {"title": "dotfiles", "desc": "My shell setup", "techs": ["bash", "vim"]}
        ],
        "others": {
            "supplements": ["Open source maintainer"],
            "socialLinks": [{"name": "blog", "url": "https://mona.example.com"}],
        },
    }


@pytest.fixture
def published(client, auth_headers, sample_resume):
    """Save a resume for the test user (which publishes it) and return its hash."""
    res = client.put("/api/resume", headers=auth_headers, json={"resume": sample_resume})
    assert res.status_code == 200
    url = res.json()["result"]["url"]
    return url.split("/", 1)[1].split("?", 1)[0]
