"""
API Namespaces - Organized endpoint groups
"""

from flask import current_app, request, send_file
from flask_restx import Namespace, Resource

from ...application.file_service import FileService
from ...application.status_service import StatusService
from ...application.user_service import UserService
from ...domain.auth import AuthGateway
from ...domain.errors import DomainError, ErrorCategory, create_error_response
from .models import (
    error_response,
    file_request,
    file_response,
    stats_response,
    status_response,
    token_response,
    user_request,
    user_response,
)

TOKEN_HEADER = "X-Token"


def _token():
    return request.headers.get(TOKEN_HEADER)


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _error_response(error: Exception, action: str):
    """Map a raised error to its client response."""
    if isinstance(error, DomainError):
        if error.category is ErrorCategory.INTERNAL:
            current_app.logger.error(f"{action} failed: {error} ({error.original_error})")
        return error.to_dict(), error.status_code

    current_app.logger.exception(f"Unexpected error in {action}: {error}")
    return create_error_response(ErrorCategory.INTERNAL)


# =============================================================================
# Status Namespace - Liveness and statistics
# =============================================================================

status_ns = Namespace("status", description="Service health operations", path="/")


@status_ns.route("/status")
class Status(Resource):
    """Backing store liveness"""

    @status_ns.doc("get_status")
    @status_ns.response(200, "Success", status_response)
    def get(self):
        """
        Report whether the session and catalog stores are reachable

        Always answers 200; the liveness checks never fail the request.
        """
        status_service = current_app.container.resolve(StatusService)
        return status_service.get_status(), 200


@status_ns.route("/stats")
class Stats(Resource):
    """Usage counters"""

    @status_ns.doc("get_stats")
    @status_ns.response(200, "Success", stats_response)
    @status_ns.response(500, "Internal Server Error", error_response)
    def get(self):
        """Return the number of users and files"""
        try:
            status_service = current_app.container.resolve(StatusService)
            return status_service.get_stats(), 200
        except Exception as e:
            return _error_response(e, "get_stats")


# =============================================================================
# Users Namespace - Registration and current user
# =============================================================================

users_ns = Namespace("users", description="User operations", path="/")


@users_ns.route("/users")
class Users(Resource):
    """User registration"""

    @users_ns.doc("create_user")
    @users_ns.expect(user_request)
    @users_ns.response(201, "Created", user_response)
    @users_ns.response(400, "Missing email / Missing password / Already exist", error_response)
    def post(self):
        """
        Register a new user

        Stores a bcrypt digest of the password and returns only id and email.
        """
        try:
            data = _json_body()
            user_service = current_app.container.resolve(UserService)
            return user_service.register(data.get("email"), data.get("password")), 201
        except Exception as e:
            return _error_response(e, "create_user")


@users_ns.route("/users/me")
class CurrentUser(Resource):
    """Authenticated user"""

    @users_ns.doc("get_me", security="token")
    @users_ns.response(200, "Success", user_response)
    @users_ns.response(401, "Unauthorized", error_response)
    def get(self):
        """Return the user behind the X-Token header"""
        try:
            user_service = current_app.container.resolve(UserService)
            return user_service.get_me(_token()), 200
        except Exception as e:
            return _error_response(e, "get_me")


# =============================================================================
# Auth Namespace - Sign in / sign out
# =============================================================================

auth_ns = Namespace("auth", description="Session operations", path="/")


@auth_ns.route("/connect")
class Connect(Resource):
    """Sign in"""

    @auth_ns.doc("connect", security="basic")
    @auth_ns.response(200, "Success", token_response)
    @auth_ns.response(401, "Unauthorized", error_response)
    def get(self):
        """
        Exchange Basic credentials for a session token

        The token is valid for 24 hours. Every failure is a bare 401.
        """
        try:
            auth_gateway = current_app.container.resolve(AuthGateway)
            token = auth_gateway.login(request.headers.get("Authorization"))
            return {"token": token}, 200
        except Exception as e:
            return _error_response(e, "connect")


@auth_ns.route("/disconnect")
class Disconnect(Resource):
    """Sign out"""

    @auth_ns.doc("disconnect", security="token")
    @auth_ns.response(204, "Session revoked")
    @auth_ns.response(401, "Unauthorized", error_response)
    def get(self):
        """Revoke the session behind the X-Token header"""
        try:
            auth_gateway = current_app.container.resolve(AuthGateway)
            auth_gateway.logout(_token())
            return "", 204
        except Exception as e:
            return _error_response(e, "disconnect")


# =============================================================================
# Files Namespace - Catalog operations
# =============================================================================

files_ns = Namespace("files", description="File and folder operations", path="/")


@files_ns.route("/files")
class Files(Resource):
    """Create and list entries"""

    @files_ns.doc("create_file", security="token")
    @files_ns.expect(file_request)
    @files_ns.response(201, "Created", file_response)
    @files_ns.response(400, "Validation failed", error_response)
    @files_ns.response(401, "Unauthorized", error_response)
    def post(self):
        """
        Create a folder, file or image

        File and image content is sent base64-encoded in `data`. Uploads
        queue a background job that builds image thumbnails.
        """
        try:
            data = _json_body()
            file_service = current_app.container.resolve(FileService)
            return file_service.create(_token(), data), 201
        except Exception as e:
            return _error_response(e, "create_file")

    @files_ns.doc(
        "list_files",
        security="token",
        params={
            "parentId": "Parent folder id, root when omitted",
            "page": "Zero-based page of 20 entries",
        },
    )
    @files_ns.response(200, "Success", [file_response])
    @files_ns.response(401, "Unauthorized", error_response)
    def get(self):
        """List the caller's entries under a parent, 20 per page"""
        try:
            file_service = current_app.container.resolve(FileService)
            entries = file_service.list(
                _token(),
                parent_id=request.args.get("parentId"),
                page=request.args.get("page", 0),
            )
            return entries, 200
        except Exception as e:
            return _error_response(e, "list_files")


@files_ns.route("/files/<string:file_id>")
@files_ns.param("file_id", "The entry identifier")
class File(Resource):
    """Single entry"""

    @files_ns.doc("get_file", security="token")
    @files_ns.response(200, "Success", file_response)
    @files_ns.response(401, "Unauthorized", error_response)
    @files_ns.response(404, "Not found", error_response)
    def get(self, file_id):
        """Return an entry owned by the caller"""
        try:
            file_service = current_app.container.resolve(FileService)
            return file_service.get(_token(), file_id), 200
        except Exception as e:
            return _error_response(e, "get_file")


@files_ns.route("/files/<string:file_id>/publish")
@files_ns.param("file_id", "The entry identifier")
class PublishFile(Resource):
    """Make an entry public"""

    @files_ns.doc("publish_file", security="token")
    @files_ns.response(200, "Success", file_response)
    @files_ns.response(401, "Unauthorized", error_response)
    @files_ns.response(404, "Not found", error_response)
    def put(self, file_id):
        """Set isPublic to true"""
        try:
            file_service = current_app.container.resolve(FileService)
            return file_service.publish(_token(), file_id), 200
        except Exception as e:
            return _error_response(e, "publish_file")


@files_ns.route("/files/<string:file_id>/unpublish")
@files_ns.param("file_id", "The entry identifier")
class UnpublishFile(Resource):
    """Make an entry private"""

    @files_ns.doc("unpublish_file", security="token")
    @files_ns.response(200, "Success", file_response)
    @files_ns.response(401, "Unauthorized", error_response)
    @files_ns.response(404, "Not found", error_response)
    def put(self, file_id):
        """Set isPublic to false"""
        try:
            file_service = current_app.container.resolve(FileService)
            return file_service.unpublish(_token(), file_id), 200
        except Exception as e:
            return _error_response(e, "unpublish_file")


@files_ns.route("/files/<string:file_id>/data")
@files_ns.param("file_id", "The entry identifier")
class FileData(Resource):
    """Entry content"""

    @files_ns.doc(
        "get_file_data",
        security="token",
        params={"size": "Thumbnail width (500, 250 or 100); original when omitted"},
    )
    @files_ns.response(200, "File content")
    @files_ns.response(400, "A folder doesn't have content", error_response)
    @files_ns.response(404, "Not found", error_response)
    def get(self, file_id):
        """
        Stream the content of an entry

        Public entries need no token. Private entries are only served to
        their owner; everyone else gets 404.
        """
        try:
            file_service = current_app.container.resolve(FileService)
            content = file_service.read_content(
                _token(), file_id, size=request.args.get("size", 0)
            )
            current_app.logger.debug(f"Serving {file_id} as {content.mimetype}")
            return send_file(content.path, mimetype=content.mimetype)
        except Exception as e:
            return _error_response(e, "get_file_data")
