import logging
import time
import uuid

from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger("commons.request")


class RequestLogMiddleware(MiddlewareMixin):
    """
    Uma linha de log por requisição, com os campos como chaves do JSON.
    """

    def process_request(self, request):
        request.request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request._start_time = time.monotonic()

    def process_response(self, request, response):
        inicio = getattr(request, "_start_time", None)
        latency = int((time.monotonic() - inicio) * 1000) if inicio else 0
        request_id = getattr(request, "request_id", "-")

        logger.info(
            "request method=%s path=%s status=%s",
            request.method,
            request.path,
            response.status_code,
            extra={
                "request_id": request_id,
                "path": request.path,
                "method": request.method,
                "status": response.status_code,
                "latency_ms": latency,
            },
        )
        response["X-Request-ID"] = request_id
        return response
