"""
Authentication Application Service

Session lifecycle: sign-in issues a token, sign-out revokes it.
"""

import logging
from typing import Optional

from files_manager.domain.auth import ISessionStore, IUserRepository, SessionToken, session_key
from files_manager.domain.auth.value_objects import DEFAULT_SESSION_TTL_SECONDS
from files_manager.domain.errors import UnauthorizedError

logger = logging.getLogger(__name__)


class AuthService:
    """
    Application service for sign-in and sign-out.

    Sessions live only in the session store; the token is the sole
    credential needed afterwards.
    """

    def __init__(
        self,
        session_store: ISessionStore,
        user_repository: IUserRepository,
        session_ttl: int = DEFAULT_SESSION_TTL_SECONDS,
    ):
        """
        Initialize AuthService.

        Args:
            session_store: Store for auth_<token> -> user id
            user_repository: Repository for credential lookups
            session_ttl: Session lifetime in seconds (default: 24 hours)
        """
        self.session_store = session_store
        self.user_repository = user_repository
        self.session_ttl = session_ttl

    def sign_in(self, email: Optional[str], password: Optional[str]) -> str:
        """
        Check credentials and open a session.

        Args:
            email: User email
            password: Clear-text password

        Returns:
            The new session token

        Raises:
            UnauthorizedError: If no user matches the credentials
            StoreUnavailableError: If a backing store is unreachable
        """
        if not email or password is None:
            raise UnauthorizedError("Missing credentials")

        user = self.user_repository.get_by_email(email)
        if user is None or not user.check_password(password):
            logger.warning("Rejected sign-in with invalid credentials")
            raise UnauthorizedError("Invalid credentials")

        token = SessionToken.generate()
        self.session_store.put(token.key, user.id, self.session_ttl)

        logger.info(f"User {user.id} signed in (token {token.masked()})")
        return token.value

    def sign_out(self, token: Optional[str]) -> None:
        """
        Revoke a session.

        Args:
            token: Session token to revoke

        Raises:
            UnauthorizedError: If the token does not name a live session
            StoreUnavailableError: If the session store is unreachable
        """
        if not token:
            raise UnauthorizedError("Missing token")

        key = session_key(token)
        user_id = self.session_store.get(key)
        if user_id is None:
            raise UnauthorizedError("Unknown or expired session")

        self.session_store.delete(key)
        logger.info(f"User {user_id} signed out")
