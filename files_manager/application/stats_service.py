"""
Stats Application Service

Store health and record counts for the status endpoints.
"""

from typing import Callable, Dict

from files_manager.domain.auth import IUserRepository
from files_manager.domain.files import IFileMetadataRepository


class StatsService:
    """Reports store health and how many users and files exist."""

    def __init__(
        self,
        user_repository: IUserRepository,
        file_repository: IFileMetadataRepository,
        health_check: Callable[[], bool],
    ):
        """
        Initialize StatsService.

        Args:
            user_repository: Repository counted for "users"
            file_repository: Repository counted for "files"
            health_check: Callable returning True while Redis answers
        """
        self.user_repository = user_repository
        self.file_repository = file_repository
        self.health_check = health_check

    def status(self) -> Dict[str, bool]:
        # Users and files both live in Redis, so one check covers both
        alive = bool(self.health_check())
        return {"redis": alive, "db": alive}

    def stats(self) -> Dict[str, int]:
        return {
            "users": self.user_repository.count(),
            "files": self.file_repository.count(),
        }
