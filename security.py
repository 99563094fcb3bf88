import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pymongo.database import Database

from errors import InvalidCredentials, Unauthorized
from settings import get_settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

# ------------------------------
# Passwords
# ------------------------------

def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False

# ------------------------------
# Tokens
# ------------------------------

def create_access_token(user_id: str, now: Optional[datetime] = None) -> str:
    settings = get_settings()
    now = now or datetime.now(timezone.utc)
    payload = {
        "user": {"id": user_id},
        "iat": now,
        "exp": now + timedelta(hours=settings.jwt_expires_hours),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> str:
    """Return the user id carried by `token`, or raise Unauthorized."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return str(payload["user"]["id"])
    except (jwt.InvalidTokenError, KeyError, TypeError) as e:
        logger.warning("Rejected token: %s", e)
        raise Unauthorized("Token is not valid")


def verify_credentials(db: Database, email: str, password: str) -> str:
    """
    Check an email/password pair and issue a token for the matching user.

    The same InvalidCredentials error is raised whether the email is unknown
    or the password is wrong.
    """
    user = db["user"].find_one({"email": email.strip().lower()})
    if not user or not check_password(password, user.get("password_hash", "")):
        raise InvalidCredentials()
    logger.info("User %s logged in", user["_id"])
    return create_access_token(str(user["_id"]))

# ------------------------------
# Access guard
# ------------------------------

def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    if credentials is None or not credentials.credentials:
        raise Unauthorized("No token, authorization denied")
    return decode_access_token(credentials.credentials)
