"""
Typed failures raised by the stores and the access guard.

Each carries the HTTP status it maps to; `main.py` turns them into JSON
responses. Anything else that escapes a handler becomes a plain-text 500.
"""
from typing import Any, Dict, List, Optional

from email_validator import EmailNotValidError, validate_email


class AppError(Exception):
    status_code = 500
    default_msg = "Server error"

    def __init__(self, msg: Optional[str] = None):
        self.msg = msg or self.default_msg
        super().__init__(self.msg)

    def to_body(self) -> Dict[str, Any]:
        return {"msg": self.msg}


class ServerError(AppError):
    pass


class ValidationError(AppError):
    """Missing or invalid input; carries one entry per failed field."""

    status_code = 400
    default_msg = "Invalid input"

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        super().__init__("; ".join(e["msg"] for e in errors) or None)

    @classmethod
    def single(cls, msg: str, param: Optional[str] = None) -> "ValidationError":
        error = {"msg": msg}
        if param:
            error["param"] = param
        return cls([error])

    def to_body(self) -> Dict[str, Any]:
        return {"errors": self.errors}


class InvalidCredentials(ValidationError):
    def __init__(self):
        super().__init__([{"msg": "Invalid credentials"}])


class Unauthorized(AppError):
    status_code = 401
    default_msg = "Token is not valid"


class Forbidden(AppError):
    status_code = 401
    default_msg = "User not authorized"


class NotFound(AppError):
    status_code = 404
    default_msg = "Not found"


class InvalidIdentifier(AppError):
    status_code = 400
    default_msg = "Incorrect id"


class AlreadyLiked(AppError):
    status_code = 400
    default_msg = "Post is already liked"


class NotLiked(AppError):
    status_code = 400
    default_msg = "Post has not been liked"


def missing_fields(payload: Dict[str, Any], messages: Dict[str, str]) -> List[Dict[str, Any]]:
    """One error entry for every field in `messages` that is empty in `payload`."""
    errors = []
    for param, msg in messages.items():
        value = payload.get(param)
        if value is None or (isinstance(value, str) and not value.strip()) or value == []:
            errors.append({"msg": msg, "param": param})
    return errors


def require(payload: Dict[str, Any], messages: Dict[str, str]) -> None:
    """Fail with a ValidationError listing every field in `messages` that is empty."""
    errors = missing_fields(payload, messages)
    if errors:
        raise ValidationError(errors)


def is_valid_email(value: Optional[str]) -> bool:
    if not value:
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True
