"""
Response Formatter - Utilities for health check responses
"""

import logging
import os
import time
from datetime import datetime, timezone
from typing import Dict, Any, Optional

import psutil

logger = logging.getLogger(__name__)


class ResponseFormatter:
    """
    Utility class for formatting operational responses consistently.
    """

    @staticmethod
    def health_response(
        status: str,
        service_name: str,
        checks: Optional[Dict[str, Any]] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Format a health check response.

        Args:
            status: Health status (healthy, alive, degraded)
            service_name: Name of the service
            checks: Individual health checks
            details: Additional health details

        Returns:
            Formatted health response
        """
        response = {
            "status": status,
            "service": service_name,
            "timestamp": ResponseFormatter._get_current_timestamp(),
            "uptime": ResponseFormatter._get_uptime()
        }

        if checks:
            response["checks"] = checks

        if details:
            response["details"] = details

        return response

    @staticmethod
    def _get_current_timestamp() -> str:
        """Get current timestamp in ISO format."""
        return datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"

    @staticmethod
    def _get_uptime() -> Optional[float]:
        """Get service uptime in seconds."""
        try:
            process = psutil.Process(os.getpid())
            uptime = time.time() - process.create_time()
            return round(uptime, 2)
        except psutil.Error as e:
            logger.debug(f"Could not read process uptime: {str(e)}")
            return None
