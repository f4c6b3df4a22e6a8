"""Serve a vanity app with pounce.

pounce's ``run()`` takes an import string, but the vanity app is built
from a loaded configuration, so ``pounce.Server`` is driven directly with
the live ASGI callable.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vanityurls.app import VanityApp
    from vanityurls.config import ServerConfig

logger = logging.getLogger("vanityurls.server")


def run_server(app: VanityApp, config: ServerConfig) -> None:
    """Start a pounce server for *app*.

    Args:
        app: The vanity ASGI application.
        config: Bind address, worker count, reload and log settings.
    """
    from pounce.config import ServerConfig as PounceConfig
    from pounce.server import Server

    logger.info(
        "Serving %d vanity path(s) on http://%s:%d",
        len(app.config.paths),
        config.host,
        config.port,
    )
    pounce_config = PounceConfig(
        host=config.host,
        port=config.port,
        workers=config.workers,
        reload=config.reload,
        log_level=config.log_level,
        log_format=config.log_format,
    )
    server = Server(pounce_config, app)
    server.run()
