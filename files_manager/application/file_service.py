"""
File Application Service

Orchestrates identity resolution, ownership and hierarchy checks, and the
metadata and content stores for every file operation.
"""

import base64
import binascii
import logging
import mimetypes
import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from files_manager.application.identity_resolver import IdentityResolver
from files_manager.domain.auth import User
from files_manager.domain.errors import (
    MissingFieldError,
    NoContentForFolderError,
    NotFoundError,
    ParentNotAFolderError,
    ParentNotFoundError,
    UnauthorizedError,
)
from files_manager.domain.files import (
    PAGE_SIZE,
    ROOT_PARENT_ID,
    File,
    FileType,
    IContentStore,
    IFileMetadataRepository,
    normalize_parent_id,
)

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class FileContent:
    """Raw file bytes plus the content type derived from the file name."""
    data: bytes
    content_type: str


class FileService:
    """
    Application service for file operations.

    Missing files and files the caller may not see both raise
    NotFoundError. Validation happens before any store is written, and
    content is written before its metadata so a failed write never
    leaves a record behind.
    """

    def __init__(
        self,
        identity_resolver: IdentityResolver,
        file_repository: IFileMetadataRepository,
        content_store: IContentStore,
        page_size: int = PAGE_SIZE,
    ):
        """
        Initialize FileService.

        Args:
            identity_resolver: Resolves session tokens to users
            file_repository: File metadata store
            content_store: Store for non-folder file bytes
            page_size: Records per page when listing (default: 20)
        """
        self.identity_resolver = identity_resolver
        self.file_repository = file_repository
        self.content_store = content_store
        self.page_size = page_size

    def _require_user(self, token: Optional[str]) -> User:
        user = self.identity_resolver.resolve_from_token(token)
        if user is None:
            raise UnauthorizedError("Token did not resolve to a user")
        return user

    def _get_owned_file(self, user: User, file_id: Optional[str]) -> File:
        file = self.file_repository.find_by_id(file_id) if file_id else None
        if file is None or not file.is_owned_by(user.id):
            raise NotFoundError(f"File {file_id} not visible to user {user.id}")
        return file

    def create(
        self,
        token: Optional[str],
        name: Any = None,
        file_type: Any = None,
        data: Any = None,
        parent_id: Any = ROOT_PARENT_ID,
        is_public: Any = False,
    ) -> Dict[str, Any]:
        """
        Create a folder, file or image.

        Checks run in order and the first failure wins: authentication,
        name, type, data, parent.

        Args:
            token: Session token
            name: File name
            file_type: One of "folder", "file", "image"
            data: Base64 payload, required unless file_type is "folder"
            parent_id: Root sentinel or the id of an existing folder
            is_public: Initial visibility

        Returns:
            Public view of the created file

        Raises:
            UnauthorizedError: If the token does not resolve to a user
            MissingFieldError: If name, type or data is missing or invalid
            ParentNotFoundError: If parent_id names no file
            ParentNotAFolderError: If parent_id names a non-folder
            StoreUnavailableError: If a store is unreachable
        """
        user = self._require_user(token)

        if not name or not isinstance(name, str):
            raise MissingFieldError("name")

        kind = FileType.parse(file_type)
        if kind is None:
            raise MissingFieldError("type")

        if kind is not FileType.FOLDER and not data:
            raise MissingFieldError("data")

        parent_id = normalize_parent_id(parent_id)
        if parent_id != ROOT_PARENT_ID:
            parent = self.file_repository.find_by_id(parent_id)
            if parent is None:
                raise ParentNotFoundError(f"Parent {parent_id} does not exist")
            if not parent.is_folder:
                raise ParentNotAFolderError(f"Parent {parent_id} is a {parent.type.value}")

        content_ref = None
        if kind is not FileType.FOLDER:
            content = self._decode_payload(data)
            content_ref = str(uuid.uuid4())
            self.content_store.write(content_ref, content)

        file = self.file_repository.insert(
            owner_id=user.id,
            name=name,
            file_type=kind,
            parent_id=parent_id,
            is_public=bool(is_public),
            content_ref=content_ref,
        )

        logger.info(f"User {user.id} created {kind.value} {file.id} under {parent_id}")
        return file.to_public_dict()

    @staticmethod
    def _decode_payload(data: Any) -> bytes:
        try:
            return base64.b64decode(data, validate=True)
        except (binascii.Error, TypeError, ValueError) as e:
            raise MissingFieldError("data", f"Undecodable payload: {e}") from e

    def show(self, token: Optional[str], file_id: Optional[str]) -> Dict[str, Any]:
        """
        Return one of the caller's files.

        Raises:
            UnauthorizedError: If the token does not resolve to a user
            NotFoundError: If the file is missing or owned by someone else
        """
        user = self._require_user(token)
        return self._get_owned_file(user, file_id).to_public_dict()

    def list(
        self,
        token: Optional[str],
        parent_id: Any = ROOT_PARENT_ID,
        page: Any = 0,
    ) -> List[Dict[str, Any]]:
        """
        List the caller's files under a parent, one page at a time.

        Args:
            token: Session token
            parent_id: Root sentinel (default) or a folder id
            page: Zero-based page number; invalid values mean page 0

        Returns:
            At most page_size public views in insertion order

        Raises:
            UnauthorizedError: If the token does not resolve to a user
        """
        user = self._require_user(token)

        page_number = self._parse_page(page)
        return [
            file.to_public_dict()
            for file in self.file_repository.find_by_owner_and_parent(
                user.id,
                normalize_parent_id(parent_id),
                skip=page_number * self.page_size,
                limit=self.page_size,
            )
        ]

    @staticmethod
    def _parse_page(page: Any) -> int:
        try:
            return max(int(page), 0)
        except (TypeError, ValueError):
            return 0

    def publish(self, token: Optional[str], file_id: Optional[str]) -> Dict[str, Any]:
        """Make one of the caller's files public."""
        return self._set_visibility(token, file_id, True)

    def unpublish(self, token: Optional[str], file_id: Optional[str]) -> Dict[str, Any]:
        """Make one of the caller's files private."""
        return self._set_visibility(token, file_id, False)

    def _set_visibility(
        self, token: Optional[str], file_id: Optional[str], is_public: bool
    ) -> Dict[str, Any]:
        """
        Atomically set is_public on one of the caller's files.

        Raises:
            UnauthorizedError: If the token does not resolve to a user
            NotFoundError: If the file is missing or owned by someone else
        """
        user = self._require_user(token)
        file = self._get_owned_file(user, file_id)

        updated = self.file_repository.update_visibility(file.id, is_public)
        if updated is None:
            raise NotFoundError(f"File {file.id} disappeared during update")

        logger.info(f"User {user.id} set file {file.id} isPublic={is_public}")
        return updated.to_public_dict()

    def fetch_content(self, token: Optional[str], file_id: Optional[str]) -> FileContent:
        """
        Return a file's bytes.

        Public files are readable by anyone, including anonymous callers;
        private files only by their owner.

        Raises:
            NotFoundError: If the file is missing, hidden from the caller,
                or its content is gone
            NoContentForFolderError: If the file is a folder
            StoreUnavailableError: If a store is unreachable
        """
        file = self.file_repository.find_by_id(file_id) if file_id else None
        if file is None:
            raise NotFoundError(f"File {file_id} does not exist")

        if not file.is_public:
            user = self.identity_resolver.resolve_from_token(token)
            if user is None or not file.is_owned_by(user.id):
                raise NotFoundError(f"File {file_id} is private")

        if file.is_folder:
            raise NoContentForFolderError(f"File {file_id} is a folder")

        if not file.content_ref or not self.content_store.exists(file.content_ref):
            raise NotFoundError(f"Content for file {file_id} is missing")

        content_type = mimetypes.guess_type(file.name)[0] or DEFAULT_CONTENT_TYPE
        return FileContent(self.content_store.read(file.content_ref), content_type)
