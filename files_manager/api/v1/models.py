"""
API Models for request/response documentation
"""

from flask_restx import fields

from files_manager.api.v1 import api

# =============================================================================
# Request Models
# =============================================================================

user_request = api.model(
    "UserRequest",
    {
        "email": fields.String(required=True, example="bob@dylan.com"),
        "password": fields.String(required=True, example="toto1234!"),
    },
)

file_request = api.model(
    "FileRequest",
    {
        "name": fields.String(required=True, description="File name", example="notes.txt"),
        "type": fields.String(
            required=True, description="Kind of record", enum=["folder", "file", "image"]
        ),
        "parentId": fields.String(
            description="Parent folder id, 0 for root", default="0"
        ),
        "isPublic": fields.Boolean(description="Initial visibility", default=False),
        "data": fields.String(
            description="Base64 content, required unless type is folder",
            example="SGVsbG8gV2Vic3RhY2shCg==",
        ),
    },
)

# =============================================================================
# Response Models
# =============================================================================

user_response = api.model(
    "UserResponse",
    {
        "id": fields.String(description="User identifier"),
        "email": fields.String(description="User email"),
    },
)

token_response = api.model(
    "TokenResponse",
    {"token": fields.String(description="Session token for the X-Token header")},
)

file_response = api.model(
    "FileResponse",
    {
        "id": fields.String(description="File identifier"),
        "userId": fields.String(description="Owner identifier"),
        "name": fields.String(description="File name"),
        "type": fields.String(enum=["folder", "file", "image"]),
        "isPublic": fields.Boolean(description="Visible to anyone"),
        "parentId": fields.Raw(description="Parent folder id, 0 for root"),
    },
)

status_response = api.model(
    "StatusResponse",
    {
        "redis": fields.Boolean(description="Session store reachable"),
        "db": fields.Boolean(description="Metadata store reachable"),
    },
)

stats_response = api.model(
    "StatsResponse",
    {
        "users": fields.Integer(description="Registered users"),
        "files": fields.Integer(description="Stored files and folders"),
    },
)

error_response = api.model(
    "ErrorResponse",
    {
        "error": fields.String(description="Error message"),
        "category": fields.String(description="Error category"),
    },
)
