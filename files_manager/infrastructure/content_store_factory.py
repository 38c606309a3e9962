"""
Content Store Factory

Creates the content store implementation from the environment.
"""

import logging
import os
from typing import Optional

from files_manager.domain.files.storage_repository import IContentStore
from files_manager.infrastructure.local_content_store import LocalContentStore

logger = logging.getLogger(__name__)

DEFAULT_FOLDER_PATH = "/tmp/files_manager"


class ContentStoreFactory:
    """Factory that returns a local filesystem content store."""

    @staticmethod
    def create_storage(folder_path: Optional[str] = None) -> IContentStore:
        """
        Create local filesystem content store.

        Args:
            folder_path: Base directory; falls back to FOLDER_PATH

        Returns:
            Local IContentStore implementation.

        Environment Variables:
            FOLDER_PATH: Base directory for content (default: /tmp/files_manager)
        """
        folder_path = folder_path or os.getenv("FOLDER_PATH", DEFAULT_FOLDER_PATH)
        logger.info(f"Content store: using local filesystem at {folder_path}")
        return LocalContentStore(folder_path)
