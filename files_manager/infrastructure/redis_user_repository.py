"""
Redis User Repository Implementation

Concrete Redis-based implementation of IUserRepository.

Keys:
- users:next_id        id counter
- users:count          number of registered users
- users:{id}           user document
- users:email:{email}  email -> id index
"""

import json
import logging
from typing import Optional

from files_manager.domain.auth.entities import User
from files_manager.domain.auth.repositories import IUserRepository
from files_manager.domain.errors import StoreUnavailableError, UserAlreadyExistsError

logger = logging.getLogger(__name__)


class RedisUserRepository(IUserRepository):
    """Redis-based implementation of IUserRepository."""

    def __init__(self, redis_repository):
        """
        Initialize with Redis repository.

        Args:
            redis_repository: RedisRepository instance from infrastructure layer
        """
        self.redis_repo = redis_repository
        self.user_prefix = "users"
        self.email_prefix = "users:email"
        self.counter_key = "users:next_id"
        self.count_key = "users:count"

    def _user_key(self, user_id: str) -> str:
        return f"{self.user_prefix}:{user_id}"

    def _email_key(self, email: str) -> str:
        return f"{self.email_prefix}:{email}"

    def add(self, email: str, password: str) -> User:
        user_id = str(self.redis_repo.increment(self.counter_key))

        # Claiming the email first makes registration race-free
        if not self.redis_repo.set_value_if_absent(self._email_key(email), user_id):
            raise UserAlreadyExistsError(f"Email already registered: {email}")

        user = User.create(user_id, email, password)
        try:
            self.redis_repo.execute_transaction([
                ("set", self._user_key(user_id), json.dumps(user.to_dict())),
                ("incr", self.count_key),
            ])
        except StoreUnavailableError:
            # Release the claim so the address can register once the store recovers
            self.redis_repo.delete(self._email_key(email))
            raise

        logger.info(f"Registered user {user_id}")
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        data = self.redis_repo.get_json(self._user_key(str(user_id)))
        if data is None:
            return None
        return User.from_dict(data)

    def get_by_email(self, email: str) -> Optional[User]:
        user_id = self.redis_repo.get_value(self._email_key(email))
        if user_id is None:
            return None
        return self.get_by_id(user_id)

    def count(self) -> int:
        return self.redis_repo.get_counter(self.count_key)
