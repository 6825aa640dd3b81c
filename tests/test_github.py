from unittest.mock import patch

import pytest
import requests
from fastapi import HTTPException

from ghmetrics.services.github import fetch_repos, fetch_user, gh_get, search_commits

def test_gh_get_builds_url_and_returns_json(fake_response):
    with patch("ghmetrics.services.github.requests.get", return_value=fake_response(payload={"login": "octocat"})) as mock_get:
        data = fetch_user("octocat")

    assert data == {"login": "octocat"}
    args, kwargs = mock_get.call_args
    assert args[0] == "https://api.github.com/users/octocat"
    assert kwargs["headers"]["Accept"] == "application/vnd.github.v3+json"
    assert "Authorization" not in kwargs["headers"]


@pytest.mark.parametrize(
    "status, detail",
    [(404, "User not found"), (403, "API rate limit exceeded"), (500, "boom")],
)
def test_gh_get_maps_errors(status, detail, fake_response):
    with patch("ghmetrics.services.github.requests.get", return_value=fake_response(status, text="boom")):
        with pytest.raises(HTTPException) as exc:
            gh_get("/users/ghost")

    assert exc.value.status_code == status
    assert exc.value.detail == detail


def test_gh_get_network_error_is_bad_gateway():
    with patch("ghmetrics.services.github.requests.get", side_effect=requests.ConnectionError("down")):
        with pytest.raises(HTTPException) as exc:
            gh_get("/users/octocat")

    assert exc.value.status_code == 502


def test_fetch_repos_uses_fixed_page_size(fake_response):
    with patch("ghmetrics.services.github.requests.get", return_value=fake_response(payload=[{"name": "a"}])) as mock_get:
        repos = fetch_repos("octocat")

    assert repos == [{"name": "a"}]
    assert mock_get.call_args.kwargs["params"] == {"sort": "updated", "per_page": 100}


def test_search_commits_returns_items(fake_response):
    payload = {"total_count": 1, "items": [{"sha": "1"}]}
    with patch("ghmetrics.services.github.requests.get", return_value=fake_response(payload=payload)) as mock_get:
        items = search_commits("octocat")

    assert items == [{"sha": "1"}]
    params = mock_get.call_args.kwargs["params"]
    assert params["q"] == "author:octocat"
    assert params["sort"] == "author-date"
    assert params["order"] == "desc"


def test_search_commits_without_items(fake_response):
    with patch("ghmetrics.services.github.requests.get", return_value=fake_response(payload={"total_count": 0})):
        assert search_commits("octocat") == []


def test_gh_get_passes_configured_timeout(fake_response):
    with (
        patch("ghmetrics.services.github.settings.REQUEST_TIMEOUT", 3.5),
        patch("ghmetrics.services.github.requests.get", return_value=fake_response(payload={})) as mock_get,
    ):
        gh_get("/users/octocat")

    assert mock_get.call_args.kwargs["timeout"] == 3.5
