"""
Base Controller - Abstract base class for all controllers

Provides access to the request introspector configured on the application
and the negotiated response format for the current request.
"""

from abc import ABC

from flask import current_app, request

from services.introspection_service import RequestIntrospector
from utils.format_helpers import FormatChoice, select_format


class BaseController(ABC):
    """
    Abstract base class for all controllers.

    Controllers should inherit from this class and use the provided helpers.
    """

    def __init__(self, introspector: RequestIntrospector = None):
        """Initialize base controller with the app's introspector."""
        self.introspector = introspector or current_app.introspector

    def _select_format(self) -> FormatChoice:
        """
        Get the response format for the current request.

        Returns:
            FormatChoice for the request
        """
        return select_format(request)

    def _public_url(self) -> str:
        """
        Get the URL clients should use to reach this service.

        Returns:
            Configured PUBLIC_URL, or the request's host URL
        """
        public_url = current_app.config.get('PUBLIC_URL') or request.host_url
        return public_url.rstrip('/')
