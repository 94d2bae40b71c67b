# tests/test_security.py

from __future__ import annotations

from datetime import timedelta

from jose import jwt

from taskflow.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


def test_password_hash_is_salted_and_verifiable() -> None:
    h1 = get_password_hash("secret")
    h2 = get_password_hash("secret")

    assert h1 != "secret"
    assert h1 != h2
    assert verify_password("secret", h1)
    assert not verify_password("other", h1)


def test_token_carries_subject_and_expiry() -> None:
    token = create_access_token({"sub": "user-1"}, "k", "HS256", timedelta(hours=1))

    claims = jwt.get_unverified_claims(token)
    assert claims["sub"] == "user-1"
    assert "exp" in claims
    assert decode_access_token(token, "k", "HS256") == "user-1"


def test_expired_token_is_rejected() -> None:
    token = create_access_token({"sub": "user-1"}, "k", "HS256", timedelta(seconds=-5))
    assert decode_access_token(token, "k", "HS256") is None


def test_wrong_secret_and_garbage_are_rejected() -> None:
    token = create_access_token({"sub": "user-1"}, "k", "HS256", timedelta(hours=1))

    assert decode_access_token(token, "other-key", "HS256") is None
    assert decode_access_token("not-a-jwt", "k", "HS256") is None
    assert decode_access_token(token[:-3] + "abc", "k", "HS256") is None


def test_token_without_subject_is_rejected() -> None:
    token = create_access_token({"role": "x"}, "k", "HS256", timedelta(hours=1))
    assert decode_access_token(token, "k", "HS256") is None
