"""
Command Helpers - Command-line invocation suggestions
"""

from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_COMMAND = 'curl'

# Flags each tool needs to write the response body to stdout
COMMAND_ARGS = {
    'curl': '',
    'wget': '-qO -',
    'fetch': '-qo -',
}


@dataclass(frozen=True)
class Cmd:
    """A command-line HTTP client and the arguments it needs."""
    name: str
    args: str = ''


def cmd_from_query_params(params: Optional[Mapping[str, str]]) -> Cmd:
    """
    Pick the command suggested by the ``cmd`` query parameter.

    Unknown or missing names fall back to curl.

    Args:
        params: Query parameter mapping (e.g. ``request.args``)

    Returns:
        Cmd for the requested tool
    """
    name = (params or {}).get('cmd', DEFAULT_COMMAND)
    if name not in COMMAND_ARGS:
        name = DEFAULT_COMMAND
    return Cmd(name=name, args=COMMAND_ARGS[name])


def build_command_line(cmd: Cmd, url: str) -> str:
    """Join a command, its arguments and a URL into a shell invocation."""
    return ' '.join(part for part in (cmd.name, cmd.args, url) if part)
