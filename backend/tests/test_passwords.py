from unittest.mock import MagicMock

import pytest

import app.services.auth.passwords as passwords
from app.services.auth import hash_password, verify_password
from app.services.exceptions import InternalError


def test_hash_then_verify():
    hashed = hash_password("correct horse battery staple")
    assert hashed != "correct horse battery staple"
    assert verify_password("correct horse battery staple", hashed) is True


def test_same_password_hashes_differently():
    first = hash_password("pass123")
    second = hash_password("pass123")
    assert first != second
    assert verify_password("pass123", first)
    assert verify_password("pass123", second)


def test_wrong_password_rejected():
    hashed = hash_password("pass123")
    assert verify_password("pass124", hashed) is False


def test_unrecognised_hash_does_not_raise():
    assert verify_password("pass123", "not-a-real-hash") is False
    assert verify_password("pass123", "") is False


def test_hashing_failure_is_internal_error(monkeypatch):
    broken = MagicMock()
    broken.hash.side_effect = RuntimeError("entropy source unavailable")
    monkeypatch.setattr(passwords, "pwd_context", broken)

    with pytest.raises(InternalError):
        hash_password("pass123")


def test_bcrypt_context_uses_configured_rounds():
    ctx = passwords.build_context("bcrypt", 10)
    assert ctx.default_scheme() == "bcrypt"
    assert ctx.hash("x").startswith("$2b$10$")
