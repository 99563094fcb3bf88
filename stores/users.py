import hashlib
import logging
from typing import Optional
from urllib.parse import urlencode

from bson import ObjectId
from pymongo.database import Database

from errors import NotFound, ValidationError
from schemas import User, to_document
from security import create_access_token, hash_password

logger = logging.getLogger(__name__)


def gravatar_url(email: str, size: int = 200) -> str:
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return f"//www.gravatar.com/avatar/{digest}?" + urlencode({"s": size, "r": "pg", "d": "mm"})


def serialize_user(user_doc) -> dict:
    return {
        "id": str(user_doc.get("_id")),
        "name": user_doc.get("name"),
        "email": user_doc.get("email"),
        "avatar": user_doc.get("avatar"),
        "date": user_doc.get("date"),
    }


def find_user(db: Database, user_id: str) -> Optional[dict]:
    if not ObjectId.is_valid(user_id):
        return None
    return db["user"].find_one({"_id": ObjectId(user_id)})


def get_user(db: Database, user_id: str) -> dict:
    user = find_user(db, user_id)
    if not user:
        raise NotFound("User not found")
    return serialize_user(user)


def register_user(db: Database, name: str, email: str, password: str) -> str:
    """Create a user and return a session token for it."""
    email = email.strip().lower()
    if db["user"].find_one({"email": email}):
        raise ValidationError.single("User already exists", "email")

    user = User(
        name=name.strip(),
        email=email,
        password_hash=hash_password(password),
        avatar=gravatar_url(email),
    )
    user_id = str(db["user"].insert_one(to_document(user)).inserted_id)
    logger.info("Registered user %s", user_id)
    return create_access_token(user_id)


def delete_account(db: Database, user_id: str) -> None:
    """Remove the user and its profile; missing documents are not an error."""
    if ObjectId.is_valid(user_id):
        db["user"].delete_one({"_id": ObjectId(user_id)})
    db["profile"].delete_one({"user": user_id})
    logger.info("Deleted account %s", user_id)
