"""Error handling pipeline for vanity requests.

Maps HTTPError exceptions and unexpected failures to plain-text
Responses. Nothing here re-raises: a bad request never takes the
server down.
"""

import logging

from vanityurls.errors import HTTPError, RenderError
from vanityurls.http.request import Request
from vanityurls.http.response import Response

logger = logging.getLogger("vanityurls.server")

PLAIN_TEXT = "text/plain; charset=utf-8"


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a plain-text Response with its status."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    body = exc.detail or f"Error {exc.status}"
    return Response(body=body, content_type=PLAIN_TEXT).with_status(exc.status)


def handle_render_error(exc: RenderError, request: Request) -> Response:
    """Template failure: log it, answer with a generic 500."""
    logger.exception("500 %s %s — %s", request.method, request.path, exc)
    return Response(body="cannot render the page", status=500, content_type=PLAIN_TEXT)


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)
    return Response(body="Internal Server Error", status=500, content_type=PLAIN_TEXT)
