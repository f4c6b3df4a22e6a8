"""Immutable HTTP request.

Only what the vanity handler reads is kept: method, path, and the
information needed to work out which host the client asked for.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request, frozen at creation from the ASGI scope."""

    method: str
    path: str
    scheme: str = "http"
    host_header: str | None = None
    server: tuple[str, int] | None = None

    @property
    def host(self) -> str:
        """The host the client addressed.

        The ``Host`` header when present, else the ASGI ``server`` address
        (port omitted when it is the scheme's default).
        """
        if self.host_header:
            return self.host_header
        if self.server is None:
            return ""
        name, port = self.server
        if port is None or _DEFAULT_PORTS.get(self.scheme) == port:
            return name
        return f"{name}:{port}"

    @property
    def is_head(self) -> bool:
        return self.method == "HEAD"

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        host_header = None
        for name, value in scope.get("headers", ()):
            if name.lower() == b"host":
                host_header = value.decode("utf-8", errors="replace")
                break
        server = scope.get("server")
        return cls(
            method=scope["method"],
            path=scope["path"],
            scheme=scope.get("scheme", "http"),
            host_header=host_header,
            server=tuple(server) if server else None,
        )
