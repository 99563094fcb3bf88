"""
Runtime settings, read from the environment (and an optional .env file).
"""
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass(frozen=True)
class Settings:
    database_url: str = ""
    database_name: str = ""
    jwt_secret: str = "devconnector-dev-secret"
    jwt_algorithm: str = "HS256"
    jwt_expires_hours: int = 100
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    port: int = 8000


@lru_cache()
def get_settings() -> Settings:
    return Settings(
        database_url=os.getenv("DATABASE_URL", ""),
        database_name=os.getenv("DATABASE_NAME", ""),
        jwt_secret=os.getenv("JWT_SECRET", Settings.jwt_secret),
        jwt_algorithm=os.getenv("JWT_ALGORITHM", Settings.jwt_algorithm),
        jwt_expires_hours=int(os.getenv("JWT_EXPIRES_HOURS", Settings.jwt_expires_hours)),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
        log_level=os.getenv("LOG_LEVEL", Settings.log_level).upper(),
        port=int(os.getenv("PORT", Settings.port)),
    )
