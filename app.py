"""
Flask ifconfig Service - Application Factory and Entry Point
"""

import atexit
import logging
from typing import Optional

from flask import Flask

from config import get_config
from routes.ifconfig import ifconfig_bp
from routes.health import health_bp
from middleware.error_handler import register_error_handlers
from services.geoip_service import GeoIPService
from services.introspection_service import RequestIntrospector
from services.lookup_service import CountryLookup, LookupService, ReverseResolver
from services.resolver_service import reverse_lookup

logger = logging.getLogger(__name__)

_UNSET = object()


def create_app(
    config_name: str = None,
    reverse_resolver: Optional[ReverseResolver] = _UNSET,
    country_lookup: Optional[CountryLookup] = _UNSET,
    **overrides
) -> Flask:
    """
    Application factory function.

    Args:
        config_name: Configuration environment name
        reverse_resolver: IP -> list of hostnames; defaults to system reverse
            DNS, None disables hostname lookups
        country_lookup: IP -> ISO country code; defaults to the configured
            GeoIP database, None disables country lookups
        **overrides: Values that replace configuration settings

    Returns:
        Configured Flask application instance
    """
    # Get configuration object
    app_config = get_config(config_name)

    # Static files are not served; every path segment is a lookup key
    app = Flask(__name__, static_folder=None)

    # Configure app from config object
    app.config.from_object(app_config)
    app.config.update(overrides)

    # Set up logging
    _setup_logging(app)

    # Register components
    _register_services(app, reverse_resolver, country_lookup)
    _register_blueprints(app)
    _register_error_handlers(app)

    logger.info(f"ifconfig service created with config: {type(app_config).__name__}")
    logger.info(f"Trusted IP header: {app.config['IP_HEADER'] or 'disabled'}")

    return app


def _setup_logging(app: Flask) -> None:
    """
    Set up logging configuration.

    Args:
        app: Flask application instance
    """
    # Set logging level
    log_level = getattr(logging, app.config['LOG_LEVEL'].upper(), logging.INFO)

    # Configure root logger
    logging.basicConfig(
        level=log_level,
        format=app.config['LOG_FORMAT'],
        handlers=[
            logging.StreamHandler(),
        ]
    )

    # Reduce noise from third-party libraries
    logging.getLogger('werkzeug').setLevel(logging.WARNING)


def _register_blueprints(app: Flask) -> None:
    """
    Register all blueprints with the application.

    Args:
        app: Flask application instance
    """
    app.register_blueprint(health_bp)
    app.register_blueprint(ifconfig_bp)

    logger.info("Blueprints registered: health, ifconfig")


def _register_error_handlers(app: Flask) -> None:
    """
    Register error handlers with the application.

    Args:
        app: Flask application instance
    """
    register_error_handlers(app)

    logger.info("Error handlers registered")


def _register_services(app: Flask, reverse_resolver, country_lookup) -> None:
    """
    Initialize and register services.

    Args:
        app: Flask application instance
        reverse_resolver: Reverse DNS collaborator, or _UNSET for the default
        country_lookup: Country collaborator, or _UNSET for the default
    """
    if reverse_resolver is _UNSET:
        reverse_resolver = reverse_lookup if app.config['REVERSE_DNS_ENABLED'] else None

    if country_lookup is _UNSET:
        country_lookup = None
        database_path = app.config['GEOIP_DATABASE']
        if database_path:
            try:
                geoip_service = GeoIPService(database_path)
                country_lookup = geoip_service.country
                atexit.register(geoip_service.close)
            except Exception as e:
                logger.error(f"Failed to load GeoIP database {database_path}: {str(e)}")
                raise

    lookup_service = LookupService(
        reverse_resolver=reverse_resolver,
        country_lookup=country_lookup,
        timeout=app.config['LOOKUP_TIMEOUT'],
        max_workers=app.config['LOOKUP_WORKERS'],
        country_workers=app.config['COUNTRY_WORKERS']
    )
    atexit.register(lookup_service.shutdown)

    # Store service instances in app context for access by controllers
    app.lookup_service = lookup_service
    app.introspector = RequestIntrospector(lookup_service, app.config['IP_HEADER'])

    logger.info(
        f"Lookup services initialized (reverse DNS: {reverse_resolver is not None}, "
        f"country: {country_lookup is not None}, timeout: {app.config['LOOKUP_TIMEOUT']}s)"
    )


# Create default app instance for direct execution and WSGI servers
app = create_app()


if __name__ == '__main__':
    # Run the Flask app using config
    logger.info(f"Starting ifconfig service on {app.config['HOST']}:{app.config['PORT']} (debug={app.config['DEBUG']})")
    app.run(host=app.config['HOST'], port=app.config['PORT'], debug=app.config['DEBUG'], threaded=True)
