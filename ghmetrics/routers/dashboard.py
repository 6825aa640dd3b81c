from fastapi import APIRouter, Depends
from ghmetrics.routers.deps import username_param
from ghmetrics.services.dashboard import search

router = APIRouter()

@router.get("/dashboard")
def dashboard(username: str = Depends(username_param)):
    """
    Everything the dashboard shows for one search. Fetch errors come back
    in `error` (with empty data) rather than as an HTTP error.
    """
    return search(username).to_dict()
