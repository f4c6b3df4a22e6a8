"""The vanity ASGI application.

Built once from a loaded ``VanityConfig``; nothing about it changes while
it serves. Concurrent requests only ever read the shared state.
"""

from pathlib import Path

from vanityurls._internal.asgi import Receive, Scope, Send
from vanityurls.config import ServerConfig, VanityConfig
from vanityurls.loader import load_config_file
from vanityurls.server.handler import handle_request
from vanityurls.templating.pages import Pages


class VanityApp:
    """ASGI application serving vanity import paths.

    Usage::

        app = VanityApp.from_file("vanity.yaml")
        app.run()

    Or hand ``app`` to any ASGI server.
    """

    __slots__ = ("_pages", "config")

    def __init__(self, config: VanityConfig | None = None) -> None:
        self.config = config or VanityConfig()
        self._pages = Pages(docs_url=self.config.docs_url)

    @classmethod
    def from_file(cls, path: str | Path) -> "VanityApp":
        """Load the YAML document at *path* and build an app from it.

        Raises:
            ConfigError: If the document is unreadable or invalid.
        """
        return cls(load_config_file(path))

    def run(self, server: ServerConfig | None = None) -> None:
        """Start serving with pounce (blocks until shutdown)."""
        from vanityurls.server.run import run_server

        run_server(self, server or ServerConfig())

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Answers the lifespan protocol directly (there is nothing to set up
        or tear down) and hands HTTP scopes to the request handler.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(scope, receive, send, config=self.config, pages=self._pages)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
