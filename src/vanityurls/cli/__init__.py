"""vanityurls CLI — serve or validate a vanity configuration.

Entry point registered as ``vanityurls`` in ``pyproject.toml``::

    [project.scripts]
    vanityurls = "vanityurls.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``vanityurls`` command."""
    parser = argparse.ArgumentParser(
        prog="vanityurls",
        description="Serve vanity import paths for Go packages.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- vanityurls run ---------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the vanity server")
    run_parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help="Path to the YAML configuration (default: $VANITY_CONFIG or vanity.yaml)",
    )
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument(
        "--port", type=int, default=None, help="Bind port number (default: $PORT or 8080)"
    )
    run_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker count (0=auto-detect)",
    )
    run_parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on code changes (development only)",
    )
    run_parser.add_argument(
        "--log-level",
        default=None,
        choices=("debug", "info", "warning", "error", "critical"),
        help="Server log level",
    )

    # -- vanityurls check -------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a configuration file")
    check_parser.add_argument("config", help="Path to the YAML configuration")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from vanityurls.cli._run import run_server

        run_server(args)
    elif args.command == "check":
        from vanityurls.cli._check import run_check

        run_check(args)
