"""
File Storage Entities

Domain entity for stored files and folders.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

# Marker used as parent_id for root-level files
ROOT_PARENT_ID = 0

PAGE_SIZE = 20

ParentId = Union[int, str]


class FileType(Enum):
    """Kinds of file records."""

    FOLDER = "folder"
    FILE = "file"
    IMAGE = "image"

    @classmethod
    def parse(cls, value: Any) -> Optional['FileType']:
        """Return the matching FileType, or None for unknown values."""
        try:
            return cls(value)
        except ValueError:
            return None


def normalize_parent_id(parent_id: Any) -> ParentId:
    """
    Normalize a client-supplied parent id.

    None, empty strings, 0 and "0" all denote the root; anything else is
    kept as a string id.
    """
    if parent_id is None or parent_id == "" or str(parent_id) == "0":
        return ROOT_PARENT_ID
    return str(parent_id)


@dataclass
class File:
    """
    Entity representing a file or folder record.

    content_ref is set for every non-folder file and never leaves the
    service layer. owner_id and parent_id are fixed at creation; only
    is_public changes afterwards.
    """
    id: str
    owner_id: str
    name: str
    type: FileType
    is_public: bool = False
    parent_id: ParentId = ROOT_PARENT_ID
    content_ref: Optional[str] = None

    @property
    def is_folder(self) -> bool:
        return self.type is FileType.FOLDER

    def is_owned_by(self, user_id: Optional[str]) -> bool:
        return user_id is not None and self.owner_id == str(user_id)

    def to_public_dict(self) -> dict:
        """Client-facing view; excludes the content handle."""
        return {
            "id": self.id,
            "userId": self.owner_id,
            "name": self.name,
            "type": self.type.value,
            "isPublic": self.is_public,
            "parentId": self.parent_id,
        }

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "userId": self.owner_id,
            "name": self.name,
            "type": self.type.value,
            "isPublic": self.is_public,
            "parentId": self.parent_id,
            "localPath": self.content_ref,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'File':
        """Create File from dictionary."""
        return cls(
            id=str(data["id"]),
            owner_id=str(data["userId"]),
            name=data["name"],
            type=FileType(data["type"]),
            is_public=bool(data.get("isPublic", False)),
            parent_id=normalize_parent_id(data.get("parentId")),
            content_ref=data.get("localPath"),
        )
