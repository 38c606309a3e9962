"""
File Storage Domain

File records, their hierarchy and visibility, and the metadata and content
stores behind them.
"""

from .entities import PAGE_SIZE, ROOT_PARENT_ID, File, FileType, normalize_parent_id
from .repositories import IFileMetadataRepository
from .storage_repository import IContentStore

__all__ = [
    "PAGE_SIZE",
    "ROOT_PARENT_ID",
    "File",
    "FileType",
    "normalize_parent_id",
    "IFileMetadataRepository",
    "IContentStore",
]
