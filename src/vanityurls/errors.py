"""vanityurls exception hierarchy.

Shared across the loader, the request handler, and the CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class VanityError(Exception):
    """Base for all vanityurls-specific errors."""


class ConfigError(VanityError):
    """Raised when the vanity configuration is invalid.

    Always raised while loading, before the server accepts a request.
    """


class RenderError(VanityError):
    """Raised when a page template fails to render."""


@dataclass(frozen=True, slots=True)
class HTTPError(VanityError):
    """An error that maps directly to an HTTP status code.

    Raised during dispatch. The ASGI handler catches these and turns
    them into a plain-text response with the matching status.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no configured path matches the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
