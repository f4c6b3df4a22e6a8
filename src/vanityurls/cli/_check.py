"""``vanityurls check`` — configuration validation command.

Loads a configuration exactly as ``vanityurls run`` would and prints the
resolved paths. Exits with code 1 if the configuration is invalid.
"""

import argparse
import sys

from vanityurls.errors import ConfigError
from vanityurls.loader import load_config_file


def run_check(args: argparse.Namespace) -> None:
    """Validate ``args.config`` and list each path with its VCS and repo."""
    try:
        config = load_config_file(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for pc in config.paths:
        print(f"{pc.path or '/'}  {pc.vcs}  {pc.repo}")
    print(f"{len(config.paths)} path(s) OK ({config.cache_control})")
