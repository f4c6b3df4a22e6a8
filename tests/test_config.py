"""Tests for vanityurls.config — ServerConfig and VanityConfig frozen dataclasses."""

import pytest

from vanityurls.config import ServerConfig, VanityConfig
from vanityurls.paths import PathConfigSet


class TestServerConfig:
    def test_defaults(self) -> None:
        cfg = ServerConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 8080
        assert cfg.workers == 1
        assert cfg.reload is False
        assert cfg.log_level == "info"
        assert cfg.config_path == "vanity.yaml"

    def test_override(self) -> None:
        cfg = ServerConfig(host="0.0.0.0", port=3000, workers=4)

        assert cfg.host == "0.0.0.0"
        assert cfg.port == 3000
        assert cfg.workers == 4

    def test_frozen(self) -> None:
        cfg = ServerConfig()

        with pytest.raises(AttributeError):
            cfg.port = 1  # type: ignore[misc]

    def test_from_env(self) -> None:
        cfg = ServerConfig.from_env({"PORT": "9000", "VANITY_CONFIG": "/etc/vanity.yaml"})

        assert cfg.port == 9000
        assert cfg.config_path == "/etc/vanity.yaml"

    def test_from_env_empty(self) -> None:
        assert ServerConfig.from_env({}) == ServerConfig()


class TestVanityConfig:
    def test_defaults(self) -> None:
        cfg = VanityConfig()

        assert cfg.host == ""
        assert cfg.cache_max_age == 86400
        assert cfg.cache_control == "public, max-age=86400"
        assert isinstance(cfg.paths, PathConfigSet)
        assert len(cfg.paths) == 0

    def test_cache_control_precomputed(self) -> None:
        assert VanityConfig(cache_max_age=300).cache_control == "public, max-age=300"

    def test_frozen(self) -> None:
        cfg = VanityConfig()

        with pytest.raises(AttributeError):
            cfg.host = "example.org"  # type: ignore[misc]
