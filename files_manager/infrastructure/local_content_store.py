"""
Local Content Store Implementation

Concrete implementation of IContentStore for the local filesystem.
Each handle maps to one file directly under the base directory.
"""

import logging
from pathlib import Path

from files_manager.domain.errors import StoreUnavailableError
from files_manager.domain.files.storage_repository import IContentStore

logger = logging.getLogger(__name__)


class LocalContentStore(IContentStore):
    """
    Local filesystem implementation of IContentStore.

    The base directory is created lazily on the first write so that a
    missing or removed directory does not break the store.

    Attributes:
        base_path: Base directory path for content files
    """

    def __init__(self, base_path: str = "/tmp/files_manager"):
        """
        Initialize the local content store.

        Args:
            base_path: Base directory for content files (default: /tmp/files_manager)
        """
        self.base_path = Path(base_path)

    def _resolve(self, handle: str) -> Path:
        """
        Map a handle to a path inside base_path.

        Raises:
            ValueError: If the handle is empty or would escape base_path
        """
        if not handle or not handle.strip():
            raise ValueError("handle cannot be empty")

        path = self.base_path / handle
        if path.parent != self.base_path or path.name in (".", ".."):
            raise ValueError(f"Invalid content handle: {handle}")
        return path

    def write(self, handle: str, content: bytes) -> None:
        full_path = self._resolve(handle)

        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
            # "xb" refuses to overwrite an existing handle
            with open(full_path, "xb") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Failed to write content {handle}: {e}")
            raise StoreUnavailableError(
                f"Failed to write content {handle}: {e}", original_error=e
            ) from e

        logger.debug(f"Wrote {len(content)} bytes to {full_path}")

    def exists(self, handle: str) -> bool:
        try:
            full_path = self._resolve(handle)
            return full_path.is_file()
        except (OSError, ValueError):
            return False

    def read(self, handle: str) -> bytes:
        full_path = self._resolve(handle)

        try:
            return full_path.read_bytes()
        except OSError as e:
            logger.error(f"Failed to read content {handle}: {e}")
            raise StoreUnavailableError(
                f"Failed to read content {handle}: {e}", original_error=e
            ) from e
