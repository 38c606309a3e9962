"""
API Namespaces - Organized endpoint groups
"""

import functools
from typing import Optional

from flask import Response, current_app, request
from flask_restx import Namespace, Resource

from files_manager.api.v1.models import (
    error_response,
    file_request,
    file_response,
    stats_response,
    status_response,
    token_response,
    user_request,
    user_response,
)
from files_manager.application import AuthService, FileService, StatsService, UserService
from files_manager.domain.errors import (
    ApplicationError,
    StoreUnavailableError,
    UnauthorizedError,
    create_error_response,
)

TOKEN_HEADER = "X-Token"


def get_token() -> Optional[str]:
    """Session token from the X-Token header, if any."""
    return request.headers.get(TOKEN_HEADER) or None


def get_basic_credentials() -> tuple[str, str]:
    """
    Email and password from a Basic Authorization header.

    Raises:
        UnauthorizedError: If the header is missing or not Basic
    """
    auth = request.authorization
    if auth is None or auth.type != "basic" or auth.username is None:
        raise UnauthorizedError("Missing or malformed Basic credentials")
    return auth.username, auth.password or ""


def resolve(service_type):
    """Resolve an application service from the app's DependencyContainer."""
    return current_app.container.resolve(service_type)


def handle_errors(method):
    """Render ApplicationError and unexpected failures as JSON errors."""

    @functools.wraps(method)
    def wrapper(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except StoreUnavailableError as e:
            current_app.logger.error(f"Store unavailable in {request.path}: {e}")
            return create_error_response(e)
        except ApplicationError as e:
            return create_error_response(e)
        except Exception as e:
            current_app.logger.exception(f"Unexpected error in {request.path}: {str(e)}")
            return create_error_response(StoreUnavailableError(str(e), original_error=e))

    return wrapper


# =============================================================================
# System Namespace - Health and statistics
# =============================================================================

system_ns = Namespace("system", description="Service status", path="/")


@system_ns.route("/status")
class Status(Resource):
    """Store reachability"""

    @system_ns.doc("get_status")
    @system_ns.response(200, "Success", status_response)
    @handle_errors
    def get(self):
        """Report whether Redis and the metadata store are reachable"""
        return resolve(StatsService).status(), 200


@system_ns.route("/stats")
class Stats(Resource):
    """Record counts"""

    @system_ns.doc("get_stats")
    @system_ns.response(200, "Success", stats_response)
    @handle_errors
    def get(self):
        """Count registered users and stored files"""
        return resolve(StatsService).stats(), 200


# =============================================================================
# Auth Namespace - Session lifecycle
# =============================================================================

auth_ns = Namespace("auth", description="Sign-in and sign-out", path="/")


@auth_ns.route("/connect")
class Connect(Resource):
    """Sign in"""

    @auth_ns.doc("connect", security="basic")
    @auth_ns.response(200, "Success", token_response)
    @auth_ns.response(401, "Unauthorized", error_response)
    @handle_errors
    def get(self):
        """
        Sign in with Basic credentials

        Returns a session token valid for 24 hours.
        """
        email, password = get_basic_credentials()
        token = resolve(AuthService).sign_in(email, password)
        return {"token": token}, 200


@auth_ns.route("/disconnect")
class Disconnect(Resource):
    """Sign out"""

    @auth_ns.doc("disconnect", security="token")
    @auth_ns.response(204, "Signed out")
    @auth_ns.response(401, "Unauthorized", error_response)
    @handle_errors
    def get(self):
        """Revoke the session named by the X-Token header"""
        resolve(AuthService).sign_out(get_token())
        return "", 204


# =============================================================================
# Users Namespace - Accounts
# =============================================================================

users_ns = Namespace("users", description="User accounts")


@users_ns.route("")
class Users(Resource):
    """User registration"""

    @users_ns.doc("create_user")
    @users_ns.expect(user_request)
    @users_ns.response(201, "Created", user_response)
    @users_ns.response(400, "Bad Request", error_response)
    @handle_errors
    def post(self):
        """Register a new user"""
        data = request.get_json(silent=True) or {}
        user = resolve(UserService).register(data.get("email"), data.get("password"))
        return user, 201


@users_ns.route("/me")
class Me(Resource):
    """Current user"""

    @users_ns.doc("get_me", security="token")
    @users_ns.response(200, "Success", user_response)
    @users_ns.response(401, "Unauthorized", error_response)
    @handle_errors
    def get(self):
        """Return the user behind the X-Token header"""
        return resolve(UserService).me(get_token()), 200


# =============================================================================
# Files Namespace - File operations
# =============================================================================

files_ns = Namespace("files", description="File operations")


@files_ns.route("")
class Files(Resource):
    """Create and list files"""

    @files_ns.doc("create_file", security="token")
    @files_ns.expect(file_request)
    @files_ns.response(201, "Created", file_response)
    @files_ns.response(400, "Bad Request", error_response)
    @files_ns.response(401, "Unauthorized", error_response)
    @handle_errors
    def post(self):
        """
        Create a folder, file or image

        Non-folder content is sent base64-encoded in "data".
        """
        data = request.get_json(silent=True) or {}
        file = resolve(FileService).create(
            get_token(),
            name=data.get("name"),
            file_type=data.get("type"),
            data=data.get("data"),
            parent_id=data.get("parentId"),
            is_public=data.get("isPublic", False),
        )
        return file, 201

    @files_ns.doc("list_files", security="token", params={
        "parentId": "Parent folder id (default: 0, root)",
        "page": "Zero-based page number, 20 files per page (default: 0)",
    })
    @files_ns.response(200, "Success", [file_response])
    @files_ns.response(401, "Unauthorized", error_response)
    @handle_errors
    def get(self):
        """List the caller's files under a parent"""
        files = resolve(FileService).list(
            get_token(),
            parent_id=request.args.get("parentId"),
            page=request.args.get("page", 0),
        )
        return files, 200


@files_ns.route("/<string:file_id>")
@files_ns.param("file_id", "The file identifier")
class FileDetail(Resource):
    """Single file"""

    @files_ns.doc("get_file", security="token")
    @files_ns.response(200, "Success", file_response)
    @files_ns.response(404, "Not Found", error_response)
    @handle_errors
    def get(self, file_id):
        """Return one of the caller's files"""
        return resolve(FileService).show(get_token(), file_id), 200


@files_ns.route("/<string:file_id>/publish")
@files_ns.param("file_id", "The file identifier")
class FilePublish(Resource):
    """Make a file public"""

    @files_ns.doc("publish_file", security="token")
    @files_ns.response(200, "Success", file_response)
    @files_ns.response(404, "Not Found", error_response)
    @handle_errors
    def put(self, file_id):
        """Set isPublic to true"""
        return resolve(FileService).publish(get_token(), file_id), 200


@files_ns.route("/<string:file_id>/unpublish")
@files_ns.param("file_id", "The file identifier")
class FileUnpublish(Resource):
    """Make a file private"""

    @files_ns.doc("unpublish_file", security="token")
    @files_ns.response(200, "Success", file_response)
    @files_ns.response(404, "Not Found", error_response)
    @handle_errors
    def put(self, file_id):
        """Set isPublic to false"""
        return resolve(FileService).unpublish(get_token(), file_id), 200


@files_ns.route("/<string:file_id>/data")
@files_ns.param("file_id", "The file identifier")
class FileData(Resource):
    """File content"""

    @files_ns.doc("get_file_data", security="token")
    @files_ns.response(200, "Raw file content")
    @files_ns.response(400, "Folder has no content", error_response)
    @files_ns.response(404, "Not Found", error_response)
    @handle_errors
    def get(self, file_id):
        """
        Return the raw content of a file

        Public files need no token; private files only answer their owner.
        """
        content = resolve(FileService).fetch_content(get_token(), file_id)
        return Response(content.data, status=200, mimetype=content.content_type)
