from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from pymongo.database import Database

from database import get_db
from errors import ValidationError, is_valid_email, missing_fields
from security import get_current_user_id, verify_credentials
from stores.users import get_user

router = APIRouter(prefix="/api/auth", tags=["auth"])

INVALID_EMAIL = "Please, include a valid email"


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


@router.get("")
def load_user(user_id: str = Depends(get_current_user_id), db: Database = Depends(get_db)):
    return get_user(db, user_id)


@router.post("")
def login(payload: LoginRequest, db: Database = Depends(get_db)):
    errors = []
    if not is_valid_email(payload.email):
        errors.append({"msg": INVALID_EMAIL, "param": "email"})
    errors += missing_fields(payload.model_dump(), {"password": "Password is required"})
    if errors:
        raise ValidationError(errors)
    return {"token": verify_credentials(db, payload.email, payload.password)}
