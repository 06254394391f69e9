"""
Password hashing policy.

bcrypt with a configurable work factor (12 by default). Hashing is
CPU-bound, so both operations run in a worker thread to keep the event
loop responsive. Results are never cached.
"""

import asyncio
import logging

import bcrypt

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """One-way password hashing and constant-time verification."""

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    async def hash(self, password: str) -> str:
        """Hash a plaintext password. Returns the modular-crypt string."""
        return await asyncio.to_thread(self._hash, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash."""
        return await asyncio.to_thread(self._verify, password, password_hash)

    def _hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def _verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash is not a valid bcrypt hash")
            return False
