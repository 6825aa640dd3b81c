import os
from typing import List

class Settings:
    CORS_ORIGINS: List[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")]
    GITHUB_API: str = os.getenv("GITHUB_API", "https://api.github.com").rstrip("/")
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "20"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
