import logging

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    """Log every incoming request as "METHOD path" before it is handled."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        logger.info("%s %s", request.method, request.get_full_path())
        return self.get_response(request)
