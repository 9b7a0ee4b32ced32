"""
Health Controller - Handles health check operations
"""

import logging
from typing import Dict, Any

from services.lookup_service import LookupService
from utils.response_formatter import ResponseFormatter

logger = logging.getLogger(__name__)


class HealthController:
    """
    Controller class for handling health check operations.
    """

    def __init__(self, lookup_service: LookupService, service_name: str, version: str):
        self.lookup_service = lookup_service
        self.service_name = service_name
        self.version = version

    def get_health_status(self) -> tuple[Dict[str, Any], int]:
        """
        Get health status of the service and its configured collaborators.

        Returns:
            tuple: (health_response_dict, status_code)
        """
        try:
            checks = {
                "reverse_dns_configured": self.lookup_service.reverse_resolver is not None,
                "country_lookup_configured": self.lookup_service.country_lookup is not None,
                "lookup_timeout_seconds": self.lookup_service.timeout
            }
            response = ResponseFormatter.health_response(
                status="healthy",
                service_name=self.service_name,
                checks=checks,
                details={"version": self.version}
            )
            return response, 200

        except Exception as e:
            logger.error(f"Health check failed: {str(e)}")
            return {
                "status": "error",
                "service": self.service_name,
                "error": str(e)
            }, 500

    def get_liveness_status(self) -> tuple[Dict[str, Any], int]:
        """
        Get liveness status (used for Kubernetes liveness probes).

        Returns:
            tuple: (liveness_response_dict, status_code)
        """
        return ResponseFormatter.health_response(
            status="alive",
            service_name=self.service_name
        ), 200
