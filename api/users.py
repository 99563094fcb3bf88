from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from pymongo.database import Database

from api.auth import INVALID_EMAIL
from database import get_db
from errors import ValidationError, is_valid_email, missing_fields
from stores.users import register_user

router = APIRouter(prefix="/api/users", tags=["users"])

MIN_PASSWORD_LENGTH = 6


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


@router.post("")
def register(payload: RegisterRequest, db: Database = Depends(get_db)):
    errors = missing_fields(payload.model_dump(), {"name": "Name is required"})
    if not is_valid_email(payload.email):
        errors.append({"msg": INVALID_EMAIL, "param": "email"})
    if not payload.password or len(payload.password) < MIN_PASSWORD_LENGTH:
        errors.append({
            "msg": f"Please enter a password with {MIN_PASSWORD_LENGTH} or more characters",
            "param": "password",
        })
    if errors:
        raise ValidationError(errors)
    return {"token": register_user(db, payload.name, payload.email, payload.password)}
