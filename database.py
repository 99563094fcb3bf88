"""
MongoDB handle shared by the request handlers.

`db` stays None when DATABASE_URL / DATABASE_NAME are not configured; the
routes then answer with a 500 instead of failing at import time.
"""
import logging
from typing import Optional

from bson import ObjectId
from pymongo import MongoClient
from pymongo.database import Database

from errors import InvalidIdentifier, ServerError
from settings import get_settings

logger = logging.getLogger(__name__)

_settings = get_settings()

client: Optional[MongoClient] = None
db: Optional[Database] = None

if _settings.database_url and _settings.database_name:
    client = MongoClient(_settings.database_url)
    db = client[_settings.database_name]
    logger.info("MongoDB configured (database=%s)", _settings.database_name)
else:
    logger.warning("DATABASE_URL / DATABASE_NAME not set, database unavailable")


def get_db() -> Database:
    if db is None:
        raise ServerError("Database not configured")
    return db


def ensure_indexes(database: Database) -> None:
    database["user"].create_index("email", unique=True)
    database["profile"].create_index("user", unique=True)
    database["post"].create_index([("date", -1)])


def to_object_id(value: str, msg: str = "Incorrect id") -> ObjectId:
    """Parse a path id, raising InvalidIdentifier when it is not an ObjectId."""
    if len(value) != 24 or not ObjectId.is_valid(value):
        raise InvalidIdentifier(msg)
    return ObjectId(value)
