"""Tests for password hashing and access tokens."""

from __future__ import annotations

from tabula.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_password_hash_verifies_only_the_original_password():
    hashed = hash_password("secret123")
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("secret124", hashed)


def test_verify_password_with_malformed_hash_is_false():
    assert not verify_password("secret123", "not-a-bcrypt-hash")


def test_access_token_round_trip_keeps_claims():
    token = create_access_token({"sub": "7", "email": "ada@example.com"})
    payload = decode_access_token(token)
    assert payload["sub"] == "7"
    assert payload["email"] == "ada@example.com"
    assert payload["exp"] > payload["iat"]


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "7"}, expires_minutes=-1)
    assert decode_access_token(token) is None


def test_tampered_token_is_rejected():
    header, payload, signature = create_access_token({"sub": "7"}).split(".")
    forged = ".".join([header, payload, signature[::-1]])
    assert decode_access_token(forged) is None
    assert decode_access_token("garbage") is None
