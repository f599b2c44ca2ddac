"""
API Models for request/response documentation
"""

from flask_restx import fields

from . import api

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
        "name": fields.String(required=True, example="myText.txt"),
        "type": fields.String(
            required=True,
            enum=["folder", "file", "image"],
            description="Entry kind",
        ),
        "data": fields.String(
            description="Base64 content, required for file and image"
        ),
        "isPublic": fields.Boolean(default=False),
        "parentId": fields.String(
            description="Parent folder id; omit or 0 for the root"
        ),
    },
)

# =============================================================================
# Response Models
# =============================================================================

error_response = api.model(
    "ErrorResponse",
    {"error": fields.String(description="Error message", example="Unauthorized")},
)

status_response = api.model(
    "StatusResponse",
    {
        "sessionStoreAlive": fields.Boolean(),
        "catalogStoreAlive": fields.Boolean(),
    },
)

stats_response = api.model(
    "StatsResponse",
    {
        "users": fields.Integer(min=0),
        "files": fields.Integer(min=0),
    },
)

user_response = api.model(
    "UserResponse",
    {
        "id": fields.String(description="User identifier"),
        "email": fields.String(),
    },
)

token_response = api.model(
    "TokenResponse",
    {"token": fields.String(description="Session token for the X-Token header")},
)

file_response = api.model(
    "FileResponse",
    {
        "id": fields.String(description="Entry identifier"),
        "userId": fields.String(description="Owner identifier"),
        "name": fields.String(),
        "type": fields.String(enum=["folder", "file", "image"]),
        "isPublic": fields.Boolean(),
        "parentId": fields.Raw(description="Parent folder id, 0 for the root"),
    },
)
