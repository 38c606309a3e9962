"""
Authentication Value Objects

Immutable value objects for session tokens.
"""

from dataclasses import dataclass
import secrets

SESSION_KEY_PREFIX = "auth_"

# 24 hours
DEFAULT_SESSION_TTL_SECONDS = 86400


class InvalidSessionTokenError(ValueError):
    """Raised when a session token is malformed."""
    pass


def session_key(token: str) -> str:
    """
    Build the session store key for a token.

    Args:
        token: Opaque session token

    Returns:
        Key in format: auth_{token}
    """
    return f"{SESSION_KEY_PREFIX}{token}"


@dataclass(frozen=True)
class SessionToken:
    """
    Value object representing a bearer session token.

    Whoever holds the token acts as the user until it expires or is revoked.
    """
    value: str

    def __post_init__(self):
        if not self.value or not isinstance(self.value, str):
            raise InvalidSessionTokenError("Session token must be a non-empty string")

    @classmethod
    def generate(cls) -> 'SessionToken':
        """
        Generate a new unguessable session token.

        Uses secrets.token_urlsafe(32), i.e. 256 bits of randomness.

        Returns:
            New SessionToken instance
        """
        return cls(secrets.token_urlsafe(32))

    @property
    def key(self) -> str:
        """Session store key for this token."""
        return session_key(self.value)

    def masked(self) -> str:
        """Shortened form safe to write to logs."""
        return f"{self.value[:8]}..."

    def __str__(self) -> str:
        return self.value
