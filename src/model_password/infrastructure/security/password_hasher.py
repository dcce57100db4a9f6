"""Bcrypt password hasher adapter."""

from __future__ import annotations

import asyncio
import re

import bcrypt

from model_password.application.ports.password_hasher_port import PasswordHasherPort

BCRYPT_HASH_PATTERN = re.compile(r"\$2[ayb]\$.{56}")
BCRYPT_MAX_PASSWORD_BYTES = 72


def is_bcrypt_hash(value: str) -> bool:
    """Return whether value is shaped like a bcrypt hash."""

    return BCRYPT_HASH_PATTERN.fullmatch(value) is not None


def _encode_password(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes; newer bcrypt releases raise instead.
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class BcryptPasswordHasher(PasswordHasherPort):
    """Password hashing adapter using bcrypt in a worker thread."""

    async def hash_password(self, password: str, *, rounds: int) -> str:
        """Hash password off the event loop with the given cost factor."""

        return await asyncio.to_thread(self._hash_sync, password, rounds)

    async def verify_password(self, *, password: str, password_hash: str) -> bool:
        """Compare password with stored hash off the event loop."""

        return await asyncio.to_thread(self._verify_sync, password, password_hash)

    def is_password_hash(self, value: str) -> bool:
        return is_bcrypt_hash(value)

    def _hash_sync(self, password: str, rounds: int) -> str:
        salt = bcrypt.gensalt(rounds=rounds)
        return bcrypt.hashpw(_encode_password(password), salt).decode("utf-8")

    def _verify_sync(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_encode_password(password), password_hash.encode("utf-8"))
        except ValueError:
            return False
