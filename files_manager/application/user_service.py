"""
User Application Service

Registration and current-user lookup.
"""

import logging
from typing import Any, Dict, Optional

from files_manager.application.identity_resolver import IdentityResolver
from files_manager.domain.auth import IUserRepository
from files_manager.domain.errors import MissingFieldError, UnauthorizedError

logger = logging.getLogger(__name__)


class UserService:
    """Application service for user accounts."""

    def __init__(self, user_repository: IUserRepository, identity_resolver: IdentityResolver):
        self.user_repository = user_repository
        self.identity_resolver = identity_resolver

    def register(self, email: Optional[str], password: Optional[str]) -> Dict[str, Any]:
        """
        Register a new user.

        Args:
            email: User email
            password: Clear-text password

        Returns:
            Public view of the created user

        Raises:
            MissingFieldError: If email or password is missing
            UserAlreadyExistsError: If the email is already registered
        """
        if not email:
            raise MissingFieldError("email")
        if not password:
            raise MissingFieldError("password")

        user = self.user_repository.add(email, password)
        return user.to_public_dict()

    def me(self, token: Optional[str]) -> Dict[str, Any]:
        """
        Return the user behind a session token.

        Raises:
            UnauthorizedError: If the token does not resolve to a user
        """
        user = self.identity_resolver.resolve_from_token(token)
        if user is None:
            raise UnauthorizedError("Token did not resolve to a user")
        return user.to_public_dict()
