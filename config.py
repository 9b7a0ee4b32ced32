"""
Configuration settings for the ifconfig service
"""

import os
from typing import Optional


class Config:
    """Base configuration class."""

    # Server settings
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', 8080))
    DEBUG = os.getenv('DEBUG', 'false').lower() == 'true'
    TESTING = False

    # Trusted forwarding header. Only set this when a reverse proxy in front
    # of the service overwrites the header; an empty value disables it.
    IP_HEADER = os.getenv('IP_HEADER', 'X-Real-IP')

    # Derived attribute lookups
    GEOIP_DATABASE = os.getenv('GEOIP_DATABASE', '')
    REVERSE_DNS_ENABLED = os.getenv('REVERSE_DNS_ENABLED', 'true').lower() == 'true'
    LOOKUP_TIMEOUT = float(os.getenv('LOOKUP_TIMEOUT', 1.0))  # seconds
    LOOKUP_WORKERS = int(os.getenv('LOOKUP_WORKERS', 8))
    COUNTRY_WORKERS = int(os.getenv('COUNTRY_WORKERS', 2))

    # URL shown in command suggestions (falls back to the request host)
    PUBLIC_URL = os.getenv('PUBLIC_URL', '')

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    SERVICE_NAME = 'ifconfig'
    VERSION = '1.0.0'


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING')


class TestingConfig(Config):
    """Testing configuration: no external databases, short lookup deadline."""
    TESTING = True
    IP_HEADER = 'X-Real-IP'
    GEOIP_DATABASE = ''
    LOOKUP_TIMEOUT = 0.5
    LOOKUP_WORKERS = 2
    COUNTRY_WORKERS = 1
    PUBLIC_URL = ''
    LOG_LEVEL = 'DEBUG'


_CONFIGS = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
}


# Configuration selector
def get_config(config_name: Optional[str] = None) -> Config:
    """Get the appropriate configuration based on name or environment."""
    env = config_name or os.getenv('FLASK_ENV', 'development')
    return _CONFIGS.get(env, DevelopmentConfig)()
