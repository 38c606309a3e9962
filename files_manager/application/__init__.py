"""
Application layer

Services that orchestrate the domain repositories for each use case.
"""

from .auth_service import AuthService
from .dependency_container import DependencyContainer, DependencyNotFoundError
from .file_service import FileContent, FileService
from .identity_resolver import IdentityResolver
from .stats_service import StatsService
from .user_service import UserService

__all__ = [
    "AuthService",
    "DependencyContainer",
    "DependencyNotFoundError",
    "FileContent",
    "FileService",
    "IdentityResolver",
    "StatsService",
    "UserService",
]
