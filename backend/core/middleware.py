import logging
import time

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    """
    Logs one structured line per API request with its outcome and duration.
    """

    # Responses slower than this are logged as warnings
    SLOW_REQUEST_MS = 1000

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if not request.path.startswith("/api/"):
            return self.get_response(request)

        started = time.monotonic()
        response = self.get_response(request)
        duration_ms = round((time.monotonic() - started) * 1000, 2)

        self._log_request(request, response, duration_ms)
        return response

    def _log_request(self, request, response, duration_ms):
        """Log with severity derived from the status code and duration."""
        user = getattr(request, "user", None)
        extra = {
            "request_path": request.path,
            "request_method": request.method,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
            "owner_id": getattr(user, "id", None) if user is not None else None,
            "action": "api_request_completed",
            "component": "RequestLogMiddleware",
        }

        if response.status_code >= 500:
            logger.error("API request failed", extra={**extra, "severity": "high"})
        elif duration_ms >= self.SLOW_REQUEST_MS:
            logger.warning(
                "Slow API request",
                extra={
                    **extra,
                    "severity": "medium",
                    "threshold_ms": self.SLOW_REQUEST_MS,
                },
            )
        else:
            logger.info("API request completed", extra=extra)
