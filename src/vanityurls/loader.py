"""YAML configuration loading.

Parses a vanity document into an immutable ``VanityConfig``::

    host: example.org
    cache_max_age: 3600
    paths:
      /pkg:
        repo: https://github.com/user/pkg
      /tool:
        repo: https://hg.example.org/tool
        vcs: hg

Loading is all-or-nothing: the first invalid entry raises ``ConfigError``
naming the offending path.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from vanityurls.config import DEFAULT_CACHE_MAX_AGE, DEFAULT_DOCS_URL, VanityConfig
from vanityurls.errors import ConfigError
from vanityurls.paths import PathConfig, PathConfigSet
from vanityurls.repos import infer_repo

logger = logging.getLogger("vanityurls.config")


def load_config_file(path: str | Path) -> VanityConfig:
    """Read and load the YAML document at *path*."""
    try:
        source = Path(path).read_bytes()
    except OSError as exc:
        msg = f"cannot read {path}: {exc.strerror or exc}"
        raise ConfigError(msg) from exc
    return load_config(source)


def load_config(source: bytes | str) -> VanityConfig:
    """Parse a YAML document into a validated ``VanityConfig``.

    Raises:
        ConfigError: If the document is malformed or any entry is invalid.
    """
    try:
        parsed = yaml.safe_load(source)
    except yaml.YAMLError as exc:
        msg = f"cannot parse configuration: {exc}"
        raise ConfigError(msg) from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, dict):
        msg = "configuration must be a mapping"
        raise ConfigError(msg)

    host = _optional_str(parsed, "host", "configuration")
    cache_max_age = _cache_max_age(parsed.get("cache_max_age"))
    docs_url = _docs_url(_optional_str(parsed, "docs_url", "configuration"))

    raw_paths = parsed.get("paths")
    if raw_paths is None:
        raw_paths = {}
    if not isinstance(raw_paths, dict):
        msg = "paths must be a mapping of import path to repository"
        raise ConfigError(msg)

    entries: dict[str, PathConfig] = {}
    for key, entry in raw_paths.items():
        pc = _path_config(str(key), entry)
        if pc.path in entries:
            msg = f"configuration for {key}: duplicate path {pc.path!r}"
            raise ConfigError(msg)
        entries[pc.path] = pc

    config = VanityConfig(
        paths=PathConfigSet(entries.values()),
        host=host,
        cache_max_age=cache_max_age,
        docs_url=docs_url,
    )
    logger.info("Loaded %d vanity path(s)", len(config.paths))
    return config


def _path_config(key: str, entry: Any) -> PathConfig:
    """Build one ``PathConfig`` from a ``paths`` entry."""
    if entry is None:
        entry = {}
    if not isinstance(entry, dict):
        msg = f"configuration for {key}: entry must be a mapping"
        raise ConfigError(msg)

    where = f"configuration for {key}"
    target = infer_repo(
        _optional_str(entry, "repo", where),
        _optional_str(entry, "vcs", where),
        _optional_str(entry, "display", where),
        path=key,
    )
    return PathConfig(
        path=key.removesuffix("/"),
        repo=target.repo,
        display=target.display,
        vcs=target.vcs,
    )


def _optional_str(mapping: dict[str, Any], name: str, where: str) -> str:
    value = mapping.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"{where}: {name} must be a string"
        raise ConfigError(msg)
    return value


def _cache_max_age(value: Any) -> int:
    if value is None:
        return DEFAULT_CACHE_MAX_AGE
    # bool is an int subclass; reject ``cache_max_age: yes``
    if isinstance(value, bool) or not isinstance(value, int):
        msg = "cache_max_age must be an integer number of seconds"
        raise ConfigError(msg)
    if value < 0:
        msg = "cache_max_age is negative"
        raise ConfigError(msg)
    return value


def _docs_url(value: str) -> str:
    if not value:
        return DEFAULT_DOCS_URL
    if not value.startswith(("http://", "https://")):
        msg = f"docs_url must be an http(s) URL, got {value!r}"
        raise ConfigError(msg)
    return value.rstrip("/")
