"""
DRF exception handler for the marketplace.

- MarketplaceError subclasses become {"detail": msg, "param": field} with
  their own status code.
- Database errors are logged with the traceback and answered as a generic
  500 so no storage detail reaches the client.
- Everything else falls through to DRF's default handler.
"""
import logging

from django.db import DatabaseError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .services.errors import MarketplaceError, StorageFailure

logger = logging.getLogger(__name__)


def marketplace_exception_handler(exc, context):
    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.exception("Storage failure in %s", type(view).__name__ if view else "unknown view")
        exc = StorageFailure()

    if isinstance(exc, MarketplaceError):
        body = {"detail": exc.message}
        if exc.param:
            body["param"] = exc.param
        return Response(body, status=exc.status_code)

    return exception_handler(exc, context)
