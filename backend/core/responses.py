"""
Uniform success envelope for API responses.

Successful responses have the shape ``{"status": "success", "data": ...}``
with an optional ``message``; paginated lists add ``count``, ``page``,
``limit`` and ``totalPages``.
"""

from rest_framework import status as http_status
from rest_framework.response import Response


def envelope(data=None, message=None, status_code=http_status.HTTP_200_OK, **meta):
    """Build an already-enveloped success response."""
    body = {"status": "success"}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    body.update(meta)

    response = Response(body, status=status_code)
    response.enveloped = True
    return response


class EnvelopeResponseMixin:
    """
    Wrap plain 2xx view responses into the success envelope.

    Error responses are formatted by the exception handler and responses built
    with ``envelope()`` are passed through untouched.
    """

    def finalize_response(self, request, response, *args, **kwargs):
        if (
            isinstance(response, Response)
            and not getattr(response, "exception", False)
            and not getattr(response, "enveloped", False)
            and 200 <= response.status_code < 300
        ):
            response.data = {"status": "success", "data": response.data}
            response.enveloped = True

        return super().finalize_response(request, response, *args, **kwargs)
