"""Server and routing configuration.

Both are frozen dataclasses — immutable after creation, IDE-autocompletable,
no string-key dict lookups. ``VanityConfig`` is normally produced by
``vanityurls.loader`` from a YAML document.
"""

import os
from dataclasses import dataclass, field

from vanityurls.paths import PathConfigSet

DEFAULT_CACHE_MAX_AGE = 86400  # 24 hours (in seconds)
DEFAULT_DOCS_URL = "https://pkg.go.dev"


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """How the vanity server is bound and run. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ServerConfig(host="0.0.0.0", port=3000, workers=4)
    """

    # Bind
    host: str = "127.0.0.1"
    port: int = 8080

    # Workers
    workers: int = 1  # 0 = auto-detect from CPU count
    reload: bool = False

    # Logging (handed to pounce)
    log_level: str = "info"
    log_format: str = "text"

    # Vanity YAML document
    config_path: str = "vanity.yaml"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "ServerConfig":
        """Build a config honouring ``PORT`` and ``VANITY_CONFIG``."""
        env = os.environ if environ is None else environ
        defaults = cls()
        port = env.get("PORT")
        return cls(
            port=int(port) if port else defaults.port,
            config_path=env.get("VANITY_CONFIG") or defaults.config_path,
        )


@dataclass(frozen=True, slots=True)
class VanityConfig:
    """Routing state for the request handler. Immutable after creation.

    ``host`` overrides the request's Host header when non-empty.
    """

    paths: PathConfigSet = field(default_factory=PathConfigSet)
    host: str = ""
    cache_max_age: int = DEFAULT_CACHE_MAX_AGE
    docs_url: str = DEFAULT_DOCS_URL

    # ``Cache-Control`` value sent with vanity pages
    cache_control: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cache_control", f"public, max-age={self.cache_max_age}")
