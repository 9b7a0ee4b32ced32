"""
Error Handler Middleware - Centralized error handling for the Flask application
"""

import logging

from flask import Flask, Response, request
from werkzeug.exceptions import HTTPException

from utils.exceptions import IfconfigError
from utils.format_helpers import FormatChoice, select_format
from utils.response_helpers import render_error, render_internal_error

logger = logging.getLogger(__name__)

# Endpoints that answer in JSON regardless of negotiation
JSON_ONLY_ENDPOINTS = ('ifconfig.all_values',)


def register_error_handlers(app: Flask) -> None:
    """
    Register all error handlers with the Flask application.

    Args:
        app: Flask application instance
    """

    @app.errorhandler(IfconfigError)
    def ifconfig_error(error: IfconfigError) -> Response:
        """Handle service errors (unknown key, unresolvable IP)."""
        if error.status_code >= 500:
            return _handle_internal_error(error)
        logger.debug(f"HTTP {error.status_code} for {request.path}: {str(error)}")
        return _render_client_error(str(error), error.status_code)

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException) -> Response:
        """Handle routing errors raised by Werkzeug (404, 405)."""
        if error.code is None or error.code >= 500:
            return _handle_internal_error(error)
        logger.debug(f"HTTP {error.code} for {request.path}: {error.description}")
        return _render_client_error(error.description or error.name, error.code)

    @app.errorhandler(Exception)
    def generic_error(error: Exception) -> Response:
        """Handle any unhandled exceptions."""
        return _handle_internal_error(error)


def _error_format() -> FormatChoice:
    """Get the format errors should use for the current request."""
    if request.endpoint in JSON_ONLY_ENDPOINTS:
        return FormatChoice.JSON
    return select_format(request)


def _render_client_error(message: str, status_code: int) -> Response:
    """
    Render a 4xx error in the negotiated format.

    Args:
        message: Error message
        status_code: HTTP status code

    Returns:
        Error response
    """
    try:
        return render_error(message, status_code, _error_format())
    except Exception as e:
        return _handle_internal_error(e)


def _handle_internal_error(error: Exception) -> Response:
    """
    Log an internal failure and return the generic 500 response.

    Args:
        error: The exception that caused the failure

    Returns:
        500 response
    """
    logger.error(f"Internal server error on {request.path}: {str(error)}", exc_info=error)
    return render_internal_error()
