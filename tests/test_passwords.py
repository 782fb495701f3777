"""
Password hasher tests.

Usage:
    pytest tests/test_passwords.py -v
"""

import string
from unittest.mock import MagicMock

import pytest

from app.api.auth import HashingError, PasswordHasher


def _plaintext(length: int) -> str:
    alphabet = string.ascii_letters + string.digits + "!@#$%^&*"
    return "".join(alphabet[(i * 7) % len(alphabet)] for i in range(length))


@pytest.mark.parametrize("length", range(8, 33))
def test_hash_round_trips_for_supported_lengths(fast_hasher: PasswordHasher, length: int):
    plaintext = _plaintext(length)
    digest = fast_hasher.hash(plaintext)

    assert digest != plaintext
    assert fast_hasher.verify(digest, plaintext) is True
    assert fast_hasher.verify(digest, plaintext + "x") is False
    assert fast_hasher.verify(digest, plaintext[:-1]) is False


def test_hash_is_salted(fast_hasher: PasswordHasher):
    first = fast_hasher.hash("password123")
    second = fast_hasher.hash("password123")

    assert first != second
    assert fast_hasher.verify(first, "password123")
    assert fast_hasher.verify(second, "password123")


def test_default_hasher_uses_bcrypt():
    hasher = PasswordHasher()
    digest = hasher.hash("password123")

    assert digest.startswith("$2b$")
    assert hasher.verify(digest, "password123")


@pytest.mark.parametrize("digest", ["", "not-a-hash", "$2b$04$short", "plaintext-password"])
def test_verify_malformed_digest_is_false(fast_hasher: PasswordHasher, digest: str):
    assert fast_hasher.verify(digest, "password123") is False


def test_hash_failure_raises_hashing_error():
    context = MagicMock()
    context.hash.side_effect = ValueError("backend unavailable")

    with pytest.raises(HashingError):
        PasswordHasher(context).hash("password123")


def test_verify_internal_failure_degrades_to_false():
    context = MagicMock()
    context.verify.side_effect = RuntimeError("backend crashed")

    assert PasswordHasher(context).verify("$2b$04$abc", "password123") is False


def test_nul_byte_cannot_be_hashed(fast_hasher: PasswordHasher):
    with pytest.raises(HashingError):
        fast_hasher.hash("pass\x00word123")
