from dotenv import load_dotenv, find_dotenv
load_dotenv(find_dotenv())  # load .env before settings are read

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from ghmetrics.core.config import settings
from ghmetrics.core.logging import setup_logging
from ghmetrics.routers import health, profile, repos, activity, dashboard

setup_logging(settings.LOG_LEVEL)

app = FastAPI(title="GitHub User Metrics API")


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(profile.router, prefix="", tags=["profile"])
app.include_router(repos.router, prefix="", tags=["repos"])
app.include_router(activity.router, prefix="", tags=["activity"])
app.include_router(dashboard.router, prefix="", tags=["dashboard"])

# uvicorn main:app --reload --port 8080
