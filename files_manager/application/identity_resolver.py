"""
Identity Resolver

Single authentication gate shared by every protected operation.
"""

import logging
from typing import Optional

from files_manager.domain.auth import ISessionStore, IUserRepository, User, session_key

logger = logging.getLogger(__name__)


class IdentityResolver:
    """
    Resolves a presented session token to a User.

    A missing token, an unknown or expired session and a session whose
    user no longer exists all resolve to None, so callers cannot tell
    which check failed.
    """

    def __init__(self, session_store: ISessionStore, user_repository: IUserRepository):
        """
        Initialize IdentityResolver with its stores.

        Args:
            session_store: Store holding auth_<token> -> user id
            user_repository: Repository used to load the user record
        """
        self.session_store = session_store
        self.user_repository = user_repository

    def resolve_from_token(self, token: Optional[str]) -> Optional[User]:
        """
        Resolve a token to its user.

        Args:
            token: Opaque session token, possibly None

        Returns:
            The authenticated User, or None when unauthenticated

        Raises:
            StoreUnavailableError: If a backing store is unreachable
        """
        if not token:
            return None

        user_id = self.session_store.get(session_key(token))
        if user_id is None:
            return None

        user = self.user_repository.get_by_id(user_id)
        if user is None:
            logger.debug(f"Session points at missing user {user_id}")
        return user
