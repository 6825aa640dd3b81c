# ghmetrics/utils/repos.py
from typing import List

REPO_CARD_LIMIT = 6

def map_user(u: dict) -> dict:
    return {
        "login": u.get("login"),
        "name": u.get("name"),
        "display_name": u.get("name") or u.get("login"),
        "avatar_url": u.get("avatar_url"),
        "bio": u.get("bio"),
        "public_repos": u.get("public_repos"),
        "followers": u.get("followers"),
        "following": u.get("following"),
        "html_url": u.get("html_url"),
    }

def map_repo(r: dict) -> dict:
    return {
        "id": r.get("id"),
        "name": r.get("name"),
        "html_url": r.get("html_url"),
        "description": r.get("description") or "No description provided",
        "language": r.get("language"),
        "stars": r.get("stargazers_count", 0),
        "forks": r.get("forks_count", 0),
        "updated_at": r.get("updated_at"),
    }

def repo_list_view(username: str, repos: List[dict], limit: int = REPO_CARD_LIMIT) -> dict:
    """First `limit` cards plus a link to the full list when there are more."""
    view = {
        "total": len(repos),
        "repos": [map_repo(r) for r in repos[:limit]],
        "view_all_url": None,
    }
    if len(repos) > limit:
        view["view_all_url"] = f"https://github.com/{username}?tab=repositories"
    return view
