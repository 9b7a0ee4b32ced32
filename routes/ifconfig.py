"""
Ifconfig Blueprint - Routes for client introspection
"""

from flask import Blueprint
from controllers.ifconfig_controller import IfconfigController

# Create blueprint
ifconfig_bp = Blueprint('ifconfig', __name__)


def get_ifconfig_controller() -> IfconfigController:
    """Get ifconfig controller instance bound to the app's introspector."""
    return IfconfigController()


@ifconfig_bp.route('/', methods=['GET'])
def client_ip():
    """
    Get the client IP.

    Returns: plain text or JSON depending on Accept/User-Agent
    """
    controller = get_ifconfig_controller()
    return controller.get_ip()


@ifconfig_bp.route('/all', methods=['GET'])
@ifconfig_bp.route('/all.json', methods=['GET'])
def all_values():
    """
    Get every request header plus the derived attributes.

    Returns: JSON object of header name -> list of values
    """
    controller = get_ifconfig_controller()
    return controller.get_all()


@ifconfig_bp.route('/cmd', methods=['GET'])
@ifconfig_bp.route('/cmd.json', methods=['GET'])
def command():
    """
    Get a shell command that fetches the client IP from this service.

    Optional query params: cmd (curl, wget or fetch; default: curl)
    Returns: plain text or JSON command suggestion
    """
    controller = get_ifconfig_controller()
    return controller.get_command()


@ifconfig_bp.route('/<key>', methods=['GET'])
def value(key: str):
    """
    Get a single value from the request view.

    Args:
        key: x-ifconfig-ip, x-ifconfig-hostname, x-ifconfig-country or any
            request header name, optionally suffixed with .json

    Returns: plain text or JSON value
    """
    controller = get_ifconfig_controller()
    return controller.get_value(key)
