"""
Search for a username and build the whole dashboard in one go.

A search always returns a fresh DashboardState: nothing from a previous
search is merged in, and a failed fetch yields an empty state carrying
only the error message.
"""

import logging
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import List, Optional

from fastapi import HTTPException

from ghmetrics.services.github import fetch_repos, fetch_user, search_commits
from ghmetrics.utils.events import events_from_commits, recent_events
from ghmetrics.utils.heatmap import build_daily_histogram
from ghmetrics.utils.repos import map_repo, map_user
from ghmetrics.utils.time import utc_today

logger = logging.getLogger(__name__)

@dataclass
class DashboardState:
    username: str = ""
    user: Optional[dict] = None
    repos: List[dict] = field(default_factory=list)
    commit_data: List[dict] = field(default_factory=list)
    recent_commits: List[dict] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

def search(username: str, today: date | None = None) -> DashboardState:
    username = (username or "").strip()
    if not username:
        raise ValueError("username must not be blank")

    try:
        user = fetch_user(username)
        repos = fetch_repos(username)
        items = search_commits(username)
    except HTTPException as e:
        logger.info("Search for %s failed: %s", username, e.detail)
        return DashboardState(username=username, error=str(e.detail))

    events = events_from_commits(items)
    buckets = build_daily_histogram(today or utc_today(), events)
    logger.info("Search for %s: %d repos, %d commits", username, len(repos), len(events))
    return DashboardState(
        username=username,
        user=map_user(user),
        repos=[map_repo(r) for r in repos],
        commit_data=[b.to_dict() for b in buckets],
        recent_commits=[ev.to_dict() for ev in recent_events(events)],
    )
