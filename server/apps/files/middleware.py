"""Middleware hiding unhandled exceptions from clients."""

import logging
from collections.abc import Callable
from typing import final

from django.http import HttpRequest, HttpResponse

from server.apps.files import messages

logger = logging.getLogger(__name__)


@final
class UnhandledExceptionMiddleware:
    """Turn any exception escaping a view into a generic 500 response.

    The exception is logged with its traceback; the client only sees
    a fixed message.
    """

    def __init__(
        self,
        get_response: Callable[[HttpRequest], HttpResponse],
    ) -> None:
        """Initialize the middleware.

        Args:
            get_response: Next handler in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Pass the request through unchanged."""
        return self.get_response(request)

    def process_exception(
        self,
        request: HttpRequest,
        exception: Exception,
    ) -> HttpResponse:
        """Log the exception and return a generic error response.

        Args:
            request: Request being processed.
            exception: Exception raised by the view.

        Returns:
            HTTP 500 response with a fixed message.
        """
        logger.exception(
            '%s %s %s',
            messages.UNHANDLED_EXCEPTION,
            request.method,
            request.path,
            exc_info=exception,
        )
        return HttpResponse(
            messages.INTERNAL_SERVER_ERROR,
            status=500,
            content_type='text/plain',
        )
