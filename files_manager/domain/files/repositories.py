"""
File Storage Repositories

Repository interface for file metadata persistence.
Concrete implementations are in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import File, FileType, ParentId


class IFileMetadataRepository(ABC):
    """
    Abstract repository interface for file metadata persistence.

    Ids are allocated by the repository at insert time and never reused.
    All methods raise StoreUnavailableError when the backing store cannot
    be reached.
    """

    @abstractmethod
    def insert(
        self,
        owner_id: str,
        name: str,
        file_type: FileType,
        parent_id: ParentId,
        is_public: bool = False,
        content_ref: Optional[str] = None,
    ) -> File:
        """
        Insert a new file record.

        Args:
            owner_id: Id of the owning user
            name: File name
            file_type: Kind of record
            parent_id: Root sentinel or the id of an existing folder
            is_public: Initial visibility
            content_ref: Content store handle, None for folders

        Returns:
            The stored File with its allocated id
        """
        pass  # pragma: no cover

    @abstractmethod
    def find_by_id(self, file_id: str) -> Optional[File]:
        """
        Retrieve a file by id.

        Returns:
            File if found, None otherwise
        """
        pass  # pragma: no cover

    @abstractmethod
    def find_by_owner_and_parent(
        self, owner_id: str, parent_id: ParentId, skip: int, limit: int
    ) -> List[File]:
        """
        List an owner's files under one parent in insertion order.

        Args:
            owner_id: Id of the owning user
            parent_id: Root sentinel or a folder id
            skip: Number of matching records to skip
            limit: Maximum number of records to return

        Returns:
            Up to limit files
        """
        pass  # pragma: no cover

    @abstractmethod
    def update_visibility(self, file_id: str, is_public: bool) -> Optional[File]:
        """
        Atomically set is_public on a file.

        Concurrent readers observe either the old or the new record.

        Returns:
            The updated File, or None if no such file exists
        """
        pass  # pragma: no cover

    @abstractmethod
    def count(self) -> int:
        """Number of stored file records."""
        pass  # pragma: no cover
