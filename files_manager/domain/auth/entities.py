"""
Authentication Entities

Domain entity for registered users.
"""

import hashlib
import hmac
from dataclasses import dataclass
from typing import Optional


def hash_password(password: str) -> str:
    """
    Hash a clear-text password into its stored form.

    Args:
        password: Clear-text password

    Returns:
        SHA-1 hex digest of the password
    """
    return hashlib.sha1(password.encode("utf-8")).hexdigest()


@dataclass
class User:
    """
    Entity representing a registered user.

    Users are looked up by the identity resolver and by sign-in; the
    password is only ever held as a hash.
    """
    id: str
    email: str
    password_hash: str

    @classmethod
    def create(cls, user_id: str, email: str, password: str) -> 'User':
        """
        Factory method to create a user from a clear-text password.

        Args:
            user_id: Identifier allocated by the user repository
            email: User email
            password: Clear-text password

        Returns:
            New User instance
        """
        return cls(id=user_id, email=email, password_hash=hash_password(password))

    def check_password(self, password: Optional[str]) -> bool:
        """
        Compare a clear-text password against the stored hash.

        Uses a constant-time comparison.
        """
        if password is None:
            return False
        return hmac.compare_digest(self.password_hash, hash_password(password))

    def to_public_dict(self) -> dict:
        """Public representation returned to clients."""
        return {"id": self.id, "email": self.email}

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "email": self.email,
            "password": self.password_hash,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'User':
        """Create User from dictionary."""
        return cls(
            id=str(data["id"]),
            email=data["email"],
            password_hash=data["password"],
        )
