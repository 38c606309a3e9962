"""
Files Manager

File-storage backend with session-token authentication, per-user folder
hierarchies, publish/unpublish visibility and local content storage.
"""

__version__ = "0.1.0"
