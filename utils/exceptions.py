"""
Custom Exceptions for the ifconfig service
"""

from utils.constants import ERROR_NO_VALUE, ERROR_NO_VALID_IP


class IfconfigError(Exception):
    """Base exception for ifconfig service errors."""
    status_code = 500


class UnknownKeyError(IfconfigError):
    """Exception raised when a requested key is not in the request view."""
    status_code = 404

    def __init__(self, key: str):
        self.key = key
        super().__init__(ERROR_NO_VALUE.format(key=key))


class UnresolvableIPError(IfconfigError):
    """Exception raised when no valid client IP can be found in a request."""
    status_code = 404

    def __init__(self, message: str = ERROR_NO_VALID_IP):
        super().__init__(message)


class LookupFailure(IfconfigError):
    """Exception raised when a derived attribute cannot be resolved."""
    pass


class RenderingError(IfconfigError):
    """Exception raised when a response body cannot be produced."""
    pass
