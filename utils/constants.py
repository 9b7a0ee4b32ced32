"""
Constants - Application-wide constants
"""

# Derived request view keys (canonical, lowercase)
KEY_IP = "x-ifconfig-ip"
KEY_HOSTNAME = "x-ifconfig-hostname"
KEY_COUNTRY = "x-ifconfig-country"
DERIVED_KEYS = (KEY_IP, KEY_HOSTNAME, KEY_COUNTRY)

# Derived keys that need a lookup beyond the client IP
LOOKUP_KEYS = (KEY_HOSTNAME, KEY_COUNTRY)

# Request headers left out of the request view: they describe the service, not the client
HIDDEN_HEADERS = ("host",)

# Same keys as they appear in "all" responses
HEADER_IP = "X-Ifconfig-Ip"
HEADER_HOSTNAME = "X-Ifconfig-Hostname"
HEADER_COUNTRY = "X-Ifconfig-Country"

# Path suffix that forces JSON
JSON_SUFFIX = ".json"

# Reverse DNS names are joined with this separator
HOSTNAME_SEPARATOR = ", "

# Content types
CONTENT_TYPE_JSON = "application/json; charset=utf-8"
CONTENT_TYPE_PLAIN = "text/plain; charset=utf-8"

# Error Messages
ERROR_NO_VALUE = "no value found for: {key}"
ERROR_NO_VALID_IP = "no valid IP found"
ERROR_INTERNAL_SERVER = "internal server error"
