"""
Content Store Interface

Abstract interface for the bytes behind non-folder files. Content is
addressed by an opaque handle generated by the file service; a handle is
written once and never rewritten.
"""

from abc import ABC, abstractmethod


class IContentStore(ABC):
    """
    Interface for file content storage.

    Contract Guarantees:
    - write() creates the backing location if it does not exist
    - exists() never raises for unknown or invalid handles
    - read() is only called for handles that exist()
    - write() and read() raise StoreUnavailableError on I/O failure
    """

    @abstractmethod
    def write(self, handle: str, content: bytes) -> None:
        """
        Persist content under a fresh handle.

        Args:
            handle: Opaque handle, unique per file
            content: Raw bytes

        Raises:
            StoreUnavailableError: If the content cannot be written
        """
        pass  # pragma: no cover

    @abstractmethod
    def exists(self, handle: str) -> bool:
        """
        Check whether content is stored under a handle.

        Returns:
            True if the content exists, False otherwise
        """
        pass  # pragma: no cover

    @abstractmethod
    def read(self, handle: str) -> bytes:
        """
        Read the content stored under a handle.

        Raises:
            StoreUnavailableError: If the content cannot be read
        """
        pass  # pragma: no cover
