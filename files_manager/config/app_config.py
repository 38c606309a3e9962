"""
Application Configuration

Settings read from the environment when the app factory runs.
"""

import os

from files_manager.domain.auth.value_objects import DEFAULT_SESSION_TTL_SECONDS
from files_manager.infrastructure.content_store_factory import DEFAULT_FOLDER_PATH


class AppConfig:
    """Application configuration."""

    def __init__(self):
        self.api_prefix = os.getenv("API_PREFIX", "").rstrip("/")
        self.folder_path = os.getenv("FOLDER_PATH", DEFAULT_FOLDER_PATH)
        self.session_ttl = int(os.getenv("SESSION_TTL_SECONDS", DEFAULT_SESSION_TTL_SECONDS))
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
