"""
Format Helpers - Response format negotiation

Chooses between plain text and JSON for a request. The precedence is fixed:
path suffix, then Accept header, then User-Agent.
"""

import re
from enum import Enum
from typing import Optional

from werkzeug.wrappers import Request

from utils.constants import JSON_SUFFIX

# curl/7.26.0, Wget/1.13.4 (linux-gnu), fetch libfetch/2.0
CLI_USER_AGENT_PATTERN = re.compile(r'^(curl|wget|fetch\slibfetch)/.*$', re.IGNORECASE)

JSON_MEDIA_TYPE = 'application/json'


class FormatChoice(Enum):
    """Response representations supported by the service."""
    PLAIN = 'plain'
    JSON = 'json'


def cli_matcher(user_agent: Optional[str]) -> bool:
    """Return True if the User-Agent belongs to a known command-line client."""
    if not user_agent:
        return False
    return CLI_USER_AGENT_PATTERN.match(user_agent) is not None


def accepts_json(accept: Optional[str]) -> bool:
    """Return True if the Accept header asks for JSON."""
    return bool(accept) and JSON_MEDIA_TYPE in accept.lower()


def select_format(req: Request) -> FormatChoice:
    """
    Decide how to render the response for a request.

    Args:
        req: Werkzeug/Flask request object

    Returns:
        FormatChoice.JSON or FormatChoice.PLAIN
    """
    if req.path.endswith(JSON_SUFFIX):
        return FormatChoice.JSON

    if accepts_json(req.headers.get('Accept')):
        return FormatChoice.JSON

    if cli_matcher(req.headers.get('User-Agent')):
        return FormatChoice.PLAIN

    # Browsers and unknown probes get plain text as well
    return FormatChoice.PLAIN
