"""Tests for vanityurls.loader — YAML parsing into VanityConfig."""

from pathlib import Path

import pytest

from vanityurls.config import VanityConfig
from vanityurls.errors import ConfigError
from vanityurls.loader import load_config, load_config_file


class TestDefaults:
    def test_empty_document(self) -> None:
        config = load_config(b"")
        assert isinstance(config, VanityConfig)
        assert len(config.paths) == 0
        assert config.host == ""
        assert config.cache_max_age == 86400
        assert config.cache_control == "public, max-age=86400"
        assert config.docs_url == "https://pkg.go.dev"

    def test_host(self) -> None:
        config = load_config("host: example.org\n")
        assert config.host == "example.org"


class TestCacheMaxAge:
    def test_custom(self) -> None:
        config = load_config("cache_max_age: 60\n")
        assert config.cache_control == "public, max-age=60"

    def test_zero(self) -> None:
        config = load_config("cache_max_age: 0\n")
        assert config.cache_control == "public, max-age=0"

    def test_negative(self) -> None:
        with pytest.raises(ConfigError, match="cache_max_age is negative"):
            load_config("cache_max_age: -1\n")

    @pytest.mark.parametrize("value", ["soon", "yes", "1.5"])
    def test_not_an_integer(self, value: str) -> None:
        with pytest.raises(ConfigError, match="cache_max_age must be an integer"):
            load_config(f"cache_max_age: {value}\n")


class TestDocsURL:
    def test_custom_strips_trailing_slash(self) -> None:
        config = load_config("docs_url: https://godoc.org/\n")
        assert config.docs_url == "https://godoc.org"

    def test_rejects_non_http(self) -> None:
        with pytest.raises(ConfigError, match="docs_url"):
            load_config("docs_url: ftp://docs.example.org\n")


class TestPaths:
    def test_github_entry(self) -> None:
        config = load_config(
            """
paths:
  /portmidi:
    repo: https://github.com/rakyll/portmidi
"""
        )
        (pc,) = config.paths
        assert pc.path == "/portmidi"
        assert pc.repo == "https://github.com/rakyll/portmidi.git"
        assert pc.vcs == "git"
        assert pc.display.startswith("https://github.com/rakyll/portmidi ")

    def test_trailing_slash_trimmed(self) -> None:
        config = load_config(
            """
paths:
  /portmidi/:
    repo: https://github.com/rakyll/portmidi
"""
        )
        assert config.paths.keys == ("/portmidi",)

    def test_sorted_regardless_of_input_order(self) -> None:
        config = load_config(
            """
paths:
  /zeta:
    repo: https://github.com/u/zeta
  /alpha:
    repo: https://github.com/u/alpha
  /alpha/beta:
    repo: https://github.com/u/beta
"""
        )
        assert config.paths.keys == ("/alpha", "/alpha/beta", "/zeta")

    def test_explicit_vcs_and_display(self) -> None:
        config = load_config(
            """
paths:
  /tool:
    repo: https://hg.example.org/tool
    vcs: hg
    display: "https://hg.example.org/tool _ _"
"""
        )
        (pc,) = config.paths
        assert pc.repo == "https://hg.example.org/tool"
        assert pc.vcs == "hg"
        assert pc.display == "https://hg.example.org/tool _ _"

    def test_error_names_offending_path(self) -> None:
        with pytest.raises(ConfigError, match="configuration for /broken: cannot infer VCS"):
            load_config(
                """
paths:
  /ok:
    repo: https://github.com/u/ok
  /broken:
    repo: https://example.org/broken
"""
            )

    def test_duplicate_after_trimming(self) -> None:
        with pytest.raises(ConfigError, match="duplicate path '/dup'"):
            load_config(
                """
paths:
  /dup:
    repo: https://github.com/u/one
  /dup/:
    repo: https://github.com/u/two
"""
            )

    def test_entry_must_be_mapping(self) -> None:
        with pytest.raises(ConfigError, match="entry must be a mapping"):
            load_config("paths:\n  /x: https://github.com/u/x\n")

    def test_field_must_be_string(self) -> None:
        with pytest.raises(ConfigError, match="vcs must be a string"):
            load_config("paths:\n  /x:\n    repo: https://example.org/x\n    vcs: [git]\n")

    @pytest.mark.parametrize("value", ["\n  - /x", " []", " false", " 0", " \"\""])
    def test_paths_must_be_mapping(self, value: str) -> None:
        with pytest.raises(ConfigError, match="paths must be a mapping"):
            load_config(f"paths:{value}\n")

    def test_null_paths_is_empty(self) -> None:
        assert len(load_config("paths:\n").paths) == 0


class TestMalformed:
    def test_invalid_yaml(self) -> None:
        with pytest.raises(ConfigError, match="cannot parse configuration"):
            load_config("paths: [unterminated\n")

    def test_top_level_not_mapping(self) -> None:
        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config("- a\n- b\n")


class TestLoadConfigFile:
    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "vanity.yaml"
        path.write_text("host: example.org\npaths:\n  /x:\n    repo: https://github.com/u/x\n")
        config = load_config_file(path)
        assert config.host == "example.org"
        assert config.paths.keys == ("/x",)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="cannot read"):
            load_config_file(tmp_path / "missing.yaml")
