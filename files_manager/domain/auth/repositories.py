"""
Authentication Repositories

Repository interfaces for sessions and users.
Concrete implementations are in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .entities import User


class ISessionStore(ABC):
    """
    Key-value store with per-key expiry.

    Expiry is enforced by the store itself: get() never returns a value
    whose TTL has elapsed. All methods raise StoreUnavailableError when
    the backing store cannot be reached.
    """

    @abstractmethod
    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        """
        Store value under key with an absolute expiry.

        Overwrites any existing value for the key.

        Args:
            key: Store key
            value: Value to store
            ttl_seconds: Time to live in seconds
        """
        pass  # pragma: no cover

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Retrieve a live value.

        Args:
            key: Store key

        Returns:
            The value if present and not expired, None otherwise
        """
        pass  # pragma: no cover

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Remove a key. Idempotent.

        Args:
            key: Store key

        Returns:
            True if a key was removed, False if it was already absent
        """
        pass  # pragma: no cover


class IUserRepository(ABC):
    """Repository interface for user persistence."""

    @abstractmethod
    def add(self, email: str, password: str) -> User:
        """
        Create a user with a freshly allocated id.

        Args:
            email: User email
            password: Clear-text password, hashed before storage

        Returns:
            The stored User

        Raises:
            UserAlreadyExistsError: If the email is already registered
        """
        pass  # pragma: no cover

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Retrieve a user by id.

        Returns:
            User if found, None otherwise
        """
        pass  # pragma: no cover

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """
        Retrieve a user by email.

        Returns:
            User if found, None otherwise
        """
        pass  # pragma: no cover

    @abstractmethod
    def count(self) -> int:
        """Number of registered users."""
        pass  # pragma: no cover
