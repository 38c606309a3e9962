"""
Authentication Domain

Users, session tokens and the stores that persist them.
"""

from .entities import User, hash_password
from .repositories import ISessionStore, IUserRepository
from .value_objects import SessionToken, session_key

__all__ = [
    "User",
    "hash_password",
    "ISessionStore",
    "IUserRepository",
    "SessionToken",
    "session_key",
]
