"""
API error types and the Flask handlers that render them as JSON
"""
import logging
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    Base class for errors that map onto an HTTP status
    @param status: int - HTTP status code sent to the client
    @param message: str - Human readable error message
    @param details: list - Optional structured details (validation errors)
    """
    status = 500

    def __init__(self, message, status=None, details=None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status
        self.details = details

    def to_dict(self):
        payload = {
            'status': self.status,
            'errorMessage': self.message
        }
        if self.details:
            payload['details'] = self.details
        return payload


class NotFoundError(ApiError):
    """Referenced entity does not exist"""
    status = 404


class MalformedRequestError(ApiError):
    """Request body does not parse into the expected shape"""
    status = 400


class StorageError(ApiError):
    """Persistence operation failed for infrastructure reasons"""
    status = 500


def error_response(status, message, details=None):
    payload = {'status': status, 'errorMessage': message}
    if details:
        payload['details'] = details
    return jsonify(payload), status


def register_error_handlers(app):
    """
    Register JSON error handlers on the Flask application
    @param app: Flask - Application to register the handlers on
    """

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status >= 500:
            logger.error(f"{type(error).__name__}: {error.message}", exc_info=error)
        else:
            logger.warning(f"{type(error).__name__}: {error.message}")
        return jsonify(error.to_dict()), error.status

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        logger.warning(f"HTTP {error.code}: {error.description}")
        return error_response(error.code, error.description)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.error(f"Unhandled error: {str(error)}", exc_info=error)
        return error_response(500, 'Internal server error')
