"""
Redis File Metadata Repository Implementation

Concrete Redis-based implementation of IFileMetadataRepository.

Keys:
- files:next_id                       id counter, never reused
- files:count                         number of stored records
- files:doc:{id}                      file document (JSON)
- files:index:{owner_id}:{parent_id}  list of ids in insertion order
"""

import json
import logging
import re
from typing import List, Optional

from files_manager.domain.files.entities import ROOT_PARENT_ID, File, FileType, ParentId
from files_manager.domain.files.repositories import IFileMetadataRepository

logger = logging.getLogger(__name__)

# Ids handed out by the files:next_id counter
FILE_ID_PATTERN = re.compile(r"[1-9][0-9]*")


class RedisFileRepository(IFileMetadataRepository):
    """
    Redis-based implementation of IFileMetadataRepository.

    The document and its (owner, parent) index entry are written in one
    MULTI/EXEC transaction; visibility changes go through a Lua script.
    """

    def __init__(self, redis_repository):
        """
        Initialize with Redis repository.

        Args:
            redis_repository: RedisRepository instance from infrastructure layer
        """
        self.redis_repo = redis_repository
        self.file_prefix = "files:doc"
        self.index_prefix = "files:index"
        self.counter_key = "files:next_id"
        self.count_key = "files:count"

    @staticmethod
    def _is_file_id(value) -> bool:
        return value is not None and FILE_ID_PATTERN.fullmatch(str(value)) is not None

    def _file_key(self, file_id: str) -> str:
        return f"{self.file_prefix}:{file_id}"

    def _index_key(self, owner_id: str, parent_id: ParentId) -> str:
        return f"{self.index_prefix}:{owner_id}:{parent_id}"

    def insert(
        self,
        owner_id: str,
        name: str,
        file_type: FileType,
        parent_id: ParentId,
        is_public: bool = False,
        content_ref: Optional[str] = None,
    ) -> File:
        file_id = str(self.redis_repo.increment(self.counter_key))
        file = File(
            id=file_id,
            owner_id=str(owner_id),
            name=name,
            type=file_type,
            is_public=is_public,
            parent_id=parent_id,
            content_ref=content_ref,
        )

        self.redis_repo.execute_transaction([
            ("set", self._file_key(file_id), self._serialize(file)),
            ("rpush", self._index_key(file.owner_id, parent_id), file_id),
            ("incr", self.count_key),
        ])

        logger.debug(f"Inserted file {file_id} for owner {owner_id} under {parent_id}")
        return file

    def find_by_id(self, file_id: str) -> Optional[File]:
        if not self._is_file_id(file_id):
            return None

        data = self.redis_repo.get_json(self._file_key(str(file_id)))
        if data is None:
            return None
        return File.from_dict(data)

    def find_by_owner_and_parent(
        self, owner_id: str, parent_id: ParentId, skip: int, limit: int
    ) -> List[File]:
        if limit <= 0:
            return []
        if parent_id != ROOT_PARENT_ID and not self._is_file_id(parent_id):
            return []

        index_key = self._index_key(str(owner_id), parent_id)
        file_ids = self.redis_repo.list_range(index_key, skip, skip + limit - 1)

        documents = self.redis_repo.get_many_json(
            [self._file_key(file_id) for file_id in file_ids]
        )
        return [File.from_dict(data) for data in documents if data is not None]

    def update_visibility(self, file_id: str, is_public: bool) -> Optional[File]:
        if not self._is_file_id(file_id):
            return None

        data = self.redis_repo.update_json_field(
            self._file_key(str(file_id)), "isPublic", bool(is_public)
        )
        if data is None:
            return None
        return File.from_dict(data)

    def count(self) -> int:
        return self.redis_repo.get_counter(self.count_key)

    @staticmethod
    def _serialize(file: File) -> str:
        return json.dumps(file.to_dict())
