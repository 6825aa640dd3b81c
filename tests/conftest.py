from datetime import date
from unittest.mock import MagicMock

import pytest

from ghmetrics.utils.events import Event


@pytest.fixture
def make_commit():
    def _make(timestamp, message="fix: typo", repo="demo", url=None):
        return {
            "commit": {"author": {"date": timestamp}, "message": message},
            "html_url": url or f"https://github.com/octocat/{repo}/commit/abc",
            "repository": {"name": repo},
        }

    return _make


@pytest.fixture
def make_event():
    def _make(day, label="commit", source="demo"):
        return Event(date=day, label=label, source=source)

    return _make


@pytest.fixture
def fake_response():
    def _make(status_code=200, payload=None, text=""):
        resp = MagicMock()
        resp.status_code = status_code
        resp.json.return_value = payload
        resp.text = text
        return resp

    return _make


@pytest.fixture
def today():
    return date(2024, 6, 15)


@pytest.fixture
def user_payload():
    return {
        "login": "octocat",
        "name": "The Octocat",
        "avatar_url": "https://avatars.githubusercontent.com/u/583231",
        "bio": None,
        "public_repos": 8,
        "followers": 100,
        "following": 9,
        "html_url": "https://github.com/octocat",
    }


@pytest.fixture
def repos_payload():
    return [
        {
            "id": i,
            "name": f"repo-{i}",
            "html_url": f"https://github.com/octocat/repo-{i}",
            "description": None if i % 2 else f"Repo {i}",
            "language": "Python",
            "stargazers_count": i,
            "forks_count": 0,
            "updated_at": "2024-06-01T10:00:00Z",
        }
        for i in range(8)
    ]
