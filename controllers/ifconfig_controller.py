"""
Ifconfig Controller - Handles client introspection requests
"""

import logging

from flask import Response, request

from controllers.base_controller import BaseController
from utils.command_helpers import build_command_line, cmd_from_query_params
from utils.constants import JSON_SUFFIX, KEY_IP
from utils.response_helpers import render_all, render_command, render_value

logger = logging.getLogger(__name__)


class IfconfigController(BaseController):
    """
    Controller class for the introspection endpoints.

    Errors raised by the introspector (unknown key, unresolvable IP)
    propagate to the registered error handlers.
    """

    def get_ip(self) -> Response:
        """
        Respond with the client IP in the negotiated format.

        Returns:
            Response with the client IP
        """
        fmt = self._select_format()
        ip = self.introspector.client_ip(request)
        return render_value(KEY_IP, str(ip), fmt)

    def get_value(self, key: str) -> Response:
        """
        Respond with a single value from the request view.

        Args:
            key: Path segment, optionally suffixed with .json

        Returns:
            Response with the value
        """
        fmt = self._select_format()
        if key.endswith(JSON_SUFFIX):
            key = key[:-len(JSON_SUFFIX)]
        key = key.lower()

        value = self.introspector.lookup(request, key)
        return render_value(key, value, fmt)

    def get_all(self) -> Response:
        """
        Respond with every header and derived attribute. Always JSON.

        Returns:
            Response with the full request view
        """
        return render_all(self.introspector.all_values(request))

    def get_command(self) -> Response:
        """
        Respond with a shell invocation that retrieves the client IP.

        Returns:
            Response with the suggested command
        """
        fmt = self._select_format()
        cmd = cmd_from_query_params(request.args)
        command_line = build_command_line(cmd, self._public_url())
        logger.debug(f"Suggesting command: {command_line}")
        return render_command(cmd, command_line, fmt)
