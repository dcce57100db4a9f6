"""Port for password hashing, verification and hash recognition."""

from __future__ import annotations

from typing import Protocol


class PasswordHasherPort(Protocol):
    """Password hashing/verification contract."""

    async def hash_password(self, password: str, *, rounds: int) -> str:
        """Hash plaintext password for storage using the given cost factor."""

    async def verify_password(self, *, password: str, password_hash: str) -> bool:
        """Verify plaintext password against stored hash."""

    def is_password_hash(self, value: str) -> bool:
        """Return whether value already has this hasher's output format."""
