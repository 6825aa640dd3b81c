import logging

import requests
from fastapi import HTTPException
from ghmetrics.core.config import settings

logger = logging.getLogger(__name__)

HEADERS = {"Accept": "application/vnd.github.v3+json"}

REPOS_PAGE_SIZE = 100

def gh_get(path: str, params: dict | None = None):
    url = f"{settings.GITHUB_API}{path}"
    logger.debug("GET %s params=%s", url, params)
    try:
        r = requests.get(url, headers=HEADERS, params=params or {}, timeout=settings.REQUEST_TIMEOUT)
    except requests.RequestException as e:
        logger.warning("GitHub request failed: %s (%s)", url, e)
        raise HTTPException(502, f"GitHub request failed: {e}")
    if r.status_code >= 400:
        logger.warning("GitHub %s -> %s", url, r.status_code)
    if r.status_code == 404: raise HTTPException(404, "User not found")
    if r.status_code == 403: raise HTTPException(403, "API rate limit exceeded")
    if r.status_code >= 400: raise HTTPException(r.status_code, r.text)
    return r.json()

def fetch_user(username: str) -> dict:
    return gh_get(f"/users/{username}")

def fetch_repos(username: str) -> list:
    repos = gh_get(f"/users/{username}/repos", {"sort": "updated", "per_page": REPOS_PAGE_SIZE})
    return repos if isinstance(repos, list) else []

def search_commits(username: str) -> list:
    """Newest-first commit search results (first page only)."""
    data = gh_get(
        "/search/commits",
        {"q": f"author:{username}", "sort": "author-date", "order": "desc", "page": 1},
    )
    if not isinstance(data, dict):
        return []
    return data.get("items") or []
