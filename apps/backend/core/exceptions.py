"""
Domain errors and the DRF exception handler that maps them to responses.

Internal causes are chained onto the domain error and logged where they are
raised; only ``error`` and ``error_code`` ever reach the client.
"""

from __future__ import annotations

import logging

from rest_framework import exceptions as drf_exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class SponsorPocketError(Exception):
    error_code = "internal_error"
    message = "An unexpected error occurred"
    status_code = 500

    def __init__(self, message: str | None = None, *, error_code: str | None = None, status_code: int | None = None):
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.status_code = status_code or self.status_code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message, "error_code": self.error_code}


class MessageDeliveryError(SponsorPocketError):
    error_code = "message_delivery_failed"
    message = "Failed to send message"


class PaymentError(SponsorPocketError):
    error_code = "payment_failed"
    message = "Unable to process payment request"


def api_exception_handler(exc, context):
    if isinstance(exc, SponsorPocketError):
        return Response(exc.to_dict(), status=exc.status_code)
    if isinstance(exc, drf_exceptions.ValidationError):
        return Response({"error": "Invalid request format", "details": exc.detail}, status=400)
    response = exception_handler(exc, context)
    if response is not None:
        return response
    request = context.get("request")
    logger.exception("[api] unhandled error path=%s", getattr(request, "path", ""))
    return Response({"error": "An unexpected error occurred"}, status=500)
