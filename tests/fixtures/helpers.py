"""
Test helpers shared across test modules.
"""

import base64


def b64(content: bytes) -> str:
    """Encode bytes the way clients send file data."""
    return base64.b64encode(content).decode("ascii")
