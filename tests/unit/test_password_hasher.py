from __future__ import annotations

import pytest

from model_password.infrastructure.security.password_hasher import (
    BcryptPasswordHasher,
    is_bcrypt_hash,
)


@pytest.mark.asyncio
async def test_hash_password_never_stores_plaintext_and_verifies() -> None:
    hasher = BcryptPasswordHasher()
    password = "super-secret-password"

    password_hash = await hasher.hash_password(password, rounds=4)

    assert password_hash != password
    assert password not in password_hash
    assert is_bcrypt_hash(password_hash)
    assert await hasher.verify_password(password=password, password_hash=password_hash) is True


@pytest.mark.asyncio
async def test_wrong_password_fails_verification() -> None:
    hasher = BcryptPasswordHasher()
    password_hash = await hasher.hash_password("correct", rounds=4)

    assert await hasher.verify_password(password="wrong", password_hash=password_hash) is False


@pytest.mark.asyncio
async def test_hash_embeds_cost_factor_and_salts_each_call() -> None:
    hasher = BcryptPasswordHasher()

    first = await hasher.hash_password("same", rounds=5)
    second = await hasher.hash_password("same", rounds=5)

    assert first.startswith("$2b$05$")
    assert first != second
    assert await hasher.verify_password(password="same", password_hash=second) is True


@pytest.mark.asyncio
async def test_passwords_longer_than_bcrypt_limit_are_truncated() -> None:
    hasher = BcryptPasswordHasher()
    long_password = "p" * 100

    password_hash = await hasher.hash_password(long_password, rounds=4)

    assert await hasher.verify_password(password=long_password, password_hash=password_hash)
    assert await hasher.verify_password(password="p" * 72, password_hash=password_hash)


@pytest.mark.asyncio
async def test_malformed_stored_hash_does_not_match() -> None:
    hasher = BcryptPasswordHasher()

    assert await hasher.verify_password(password="secret", password_hash="not-a-hash") is False


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("$2a$" + "x" * 56, True),
        ("$2y$" + "x" * 56, True),
        ("$2b$10$" + "a" * 53, True),
        ("$2x$" + "x" * 56, False),
        ("$2b$" + "x" * 55, False),
        ("$2b$" + "x" * 57, False),
        ("$2b$" + "x" * 56 + "\n", False),
        ("secret", False),
        ("", False),
    ],
)
def test_is_password_hash_matches_bcrypt_shape_only(value: str, expected: bool) -> None:
    assert BcryptPasswordHasher().is_password_hash(value) is expected
