from fastapi import APIRouter, Depends
from ghmetrics.routers.deps import username_param
from ghmetrics.services.github import fetch_user
from ghmetrics.utils.repos import map_user

router = APIRouter()

@router.get("/profile")
def profile(username: str = Depends(username_param)):
    return map_user(fetch_user(username))
