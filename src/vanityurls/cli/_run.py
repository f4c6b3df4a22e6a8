"""``vanityurls run`` — load the configuration and start pounce.

The configuration is loaded before the server starts; an invalid file
stops the command with exit code 1 and nothing is served.
"""

import argparse
import sys
from dataclasses import replace

from vanityurls.app import VanityApp
from vanityurls.config import ServerConfig
from vanityurls.errors import ConfigError


def run_server(args: argparse.Namespace) -> None:
    """Start the vanity server.

    Defaults come from ``ServerConfig.from_env()``; CLI flags override them.
    """
    server = ServerConfig.from_env()
    server = replace(
        server,
        host=args.host or server.host,
        port=args.port or server.port,
        workers=args.workers if args.workers is not None else server.workers,
        reload=args.reload or server.reload,
        log_level=args.log_level or server.log_level,
        config_path=args.config or server.config_path,
    )

    try:
        app = VanityApp.from_file(server.config_path)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from vanityurls.server.run import run_server as serve

    serve(app, server)
