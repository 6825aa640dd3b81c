from fastapi import APIRouter, Depends
from ghmetrics.routers.deps import username_param
from ghmetrics.services.github import fetch_repos
from ghmetrics.utils.repos import repo_list_view

router = APIRouter()

@router.get("/repos")
def repos(username: str = Depends(username_param)):
    """Most recently updated repos as cards (first 6) plus the total count."""
    view = repo_list_view(username, fetch_repos(username))
    return {"username": username, **view}
