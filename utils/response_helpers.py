"""
Response Helpers - Plain text and JSON rendering

JSON bodies are byte-stable: keys sorted, two-space indentation, ``\\n``
line endings and no trailing newline. Clients diff these responses, so the
formatting is fixed here rather than left to the JSON provider defaults.
"""

from typing import Any, Dict, List, Mapping

from flask import Response, current_app

from utils.command_helpers import Cmd
from utils.constants import (
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_PLAIN,
    ERROR_INTERNAL_SERVER
)
from utils.exceptions import RenderingError
from utils.format_helpers import FormatChoice


def dump_json(payload: Any) -> str:
    """
    Serialize a payload with the service's fixed JSON layout.

    Raises:
        RenderingError: If the payload cannot be serialized
    """
    try:
        return current_app.json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise RenderingError(f"Failed to serialize response: {str(e)}") from e


def _json_response(payload: Any, status_code: int = 200) -> Response:
    return Response(dump_json(payload), status=status_code, content_type=CONTENT_TYPE_JSON)


def _plain_response(body: str, status_code: int = 200) -> Response:
    return Response(body, status=status_code, content_type=CONTENT_TYPE_PLAIN)


def render_value(key: str, value: str, fmt: FormatChoice) -> Response:
    """
    Render a single value from the request view.

    Args:
        key: Canonical key the value was looked up by
        value: The value (may be empty)
        fmt: Output format

    Returns:
        200 response
    """
    if fmt is FormatChoice.JSON:
        return _json_response({key: value})
    return _plain_response(value + '\n')


def render_all(values: Mapping[str, List[str]]) -> Response:
    """
    Render the full request view. Always JSON.

    Args:
        values: Header-style mapping of names to lists of values

    Returns:
        200 response
    """
    return _json_response(dict(values))


def render_error(message: str, status_code: int, fmt: FormatChoice) -> Response:
    """
    Render a client-facing error.

    Args:
        message: Error message
        status_code: HTTP status code
        fmt: Output format

    Returns:
        Error response
    """
    if fmt is FormatChoice.JSON:
        return _json_response({"error": message}, status_code)
    return _plain_response(message, status_code)


def render_command(cmd: Cmd, command_line: str, fmt: FormatChoice) -> Response:
    """
    Render a command suggestion.

    Args:
        cmd: Suggested command
        command_line: Full shell invocation including the service URL
        fmt: Output format

    Returns:
        200 response
    """
    if fmt is FormatChoice.JSON:
        payload: Dict[str, str] = {
            "name": cmd.name,
            "args": cmd.args,
            "command": command_line
        }
        return _json_response(payload)
    return _plain_response(command_line + '\n')


def render_internal_error() -> Response:
    """Render the generic 500 response. Never fails."""
    return _plain_response(ERROR_INTERNAL_SERVER, 500)
