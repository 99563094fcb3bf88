# tests/test_security.py
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from errors import InvalidCredentials, Unauthorized
from security import (
    check_password,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_credentials,
)
from settings import get_settings
from stores.users import register_user


class TestPasswords:

    def test_hash_round_trip(self):
        hashed = hash_password("secret123")
        assert hashed != "secret123"
        assert check_password("secret123", hashed)
        assert not check_password("wrong", hashed)

    def test_non_bcrypt_hash_never_matches(self):
        assert not check_password("demo", "demo")


class TestTokens:

    def test_token_carries_user_id(self):
        token = create_access_token("5f1d7f1e2b3c4d5e6f7a8b9c")
        assert decode_access_token(token) == "5f1d7f1e2b3c4d5e6f7a8b9c"

    def test_token_expires_after_configured_hours(self):
        now = datetime.now(timezone.utc)
        token = create_access_token("5f1d7f1e2b3c4d5e6f7a8b9c", now=now)
        settings = get_settings()
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        assert payload["exp"] - payload["iat"] == 100 * 3600

    def test_expired_token_is_rejected(self):
        issued = datetime.now(timezone.utc) - timedelta(hours=101)
        token = create_access_token("5f1d7f1e2b3c4d5e6f7a8b9c", now=issued)
        with pytest.raises(Unauthorized):
            decode_access_token(token)

    def test_foreign_signature_is_rejected(self):
        token = jwt.encode({"user": {"id": "x"}}, "another-secret", algorithm="HS256")
        with pytest.raises(Unauthorized):
            decode_access_token(token)

    def test_payload_without_user_is_rejected(self):
        settings = get_settings()
        token = jwt.encode({"sub": "x"}, settings.jwt_secret, algorithm=settings.jwt_algorithm)
        with pytest.raises(Unauthorized):
            decode_access_token(token)


class TestVerifyCredentials:

    def test_valid_credentials_issue_token_for_same_user(self, db):
        token = register_user(db, "Alice", "Alice@Example.com", "secret123")
        user_id = decode_access_token(token)

        issued = verify_credentials(db, "alice@example.com", "secret123")
        assert decode_access_token(issued) == user_id

    def test_wrong_email_and_wrong_password_fail_identically(self, db):
        register_user(db, "Alice", "alice@example.com", "secret123")

        with pytest.raises(InvalidCredentials) as unknown_email:
            verify_credentials(db, "nobody@example.com", "secret123")
        with pytest.raises(InvalidCredentials) as bad_password:
            verify_credentials(db, "alice@example.com", "nope")

        assert unknown_email.value.to_body() == bad_password.value.to_body()
        assert unknown_email.value.status_code == bad_password.value.status_code == 400
