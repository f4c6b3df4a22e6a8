"""vanityurls — serve vanity import paths for Go packages.

Answers ``go get`` with ``go-import``/``go-source`` meta tags pointing at
the real repository, and sends browsers to the documentation site.

Basic usage::

    from vanityurls import VanityApp

    app = VanityApp.from_file("vanity.yaml")
    app.run()

Configuration (``vanity.yaml``)::

    host: example.org
    paths:
      /pkg:
        repo: https://github.com/user/pkg
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "HTTPError",
    "NotFound",
    "PathConfig",
    "PathConfigSet",
    "RenderError",
    "ServerConfig",
    "VanityApp",
    "VanityConfig",
    "VanityError",
    "infer_repo",
    "load_config",
    "load_config_file",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import vanityurls`` fast while providing a clean top-level API.
    """
    if name == "VanityApp":
        from vanityurls.app import VanityApp

        return VanityApp

    if name in ("ServerConfig", "VanityConfig"):
        from vanityurls import config as _config

        return getattr(_config, name)

    if name in ("PathConfig", "PathConfigSet"):
        from vanityurls import paths as _paths

        return getattr(_paths, name)

    if name == "infer_repo":
        from vanityurls.repos import infer_repo

        return infer_repo

    if name in ("load_config", "load_config_file"):
        from vanityurls import loader as _loader

        return getattr(_loader, name)

    if name in ("ConfigError", "HTTPError", "NotFound", "RenderError", "VanityError"):
        from vanityurls import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
