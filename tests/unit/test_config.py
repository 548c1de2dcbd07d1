"""Tests for blogcheck.config.

Tests the configuration system including:
- Loading .blogcheck.yaml from the content root
- Setting precedence (env > config file > default)
- Type coercion and error reporting
"""

from __future__ import annotations

from pathlib import Path

import pytest

from blogcheck.config import (
    CONFIG_FILENAME,
    Settings,
    get_config_path,
    load_config,
    load_settings,
)
from blogcheck.errors import ConfigParseError, ConfigValueError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep BLOGCHECK_* variables from the outer environment out of these tests."""
    import os

    for name in list(os.environ):
        if name.startswith("BLOGCHECK_"):
            monkeypatch.delenv(name)


def _write_config(root: Path, content: str) -> None:
    (root / CONFIG_FILENAME).write_text(content, encoding="utf-8")


class TestLoadConfig:
    """Tests for load_config function."""

    @pytest.mark.unit
    def test_returns_empty_dict_when_file_missing(self, tmp_path: Path) -> None:
        assert load_config(tmp_path) == {}

    @pytest.mark.unit
    def test_reads_yaml_file(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "public_dir: static\nmax_image_mb: 2\n")

        assert load_config(tmp_path) == {"public_dir": "static", "max_image_mb": 2}

    @pytest.mark.unit
    def test_handles_empty_file(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "\n")

        assert load_config(tmp_path) == {}

    @pytest.mark.unit
    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "public_dir: [unclosed\n")

        with pytest.raises(ConfigParseError) as exc_info:
            load_config(tmp_path)
        assert exc_info.value.code == "BLOG-CFG001"

    @pytest.mark.unit
    def test_non_utf8_file_raises(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_bytes(b"public_dir: \xff\xfe\n")

        with pytest.raises(ConfigParseError) as exc_info:
            load_config(tmp_path)
        assert exc_info.value.code == "BLOG-CFG001"

    @pytest.mark.unit
    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "- one\n- two\n")

        with pytest.raises(ConfigParseError, match="mapping"):
            load_config(tmp_path)

    @pytest.mark.unit
    def test_config_path(self, tmp_path: Path) -> None:
        assert get_config_path(tmp_path) == tmp_path / ".blogcheck.yaml"


class TestLoadSettings:
    """Tests for load_settings precedence and coercion."""

    @pytest.mark.unit
    def test_defaults(self, tmp_path: Path) -> None:
        settings = load_settings(tmp_path)

        assert settings == Settings()
        assert settings.posts_file == "blog-posts.json"
        assert settings.promotions_file == "promotions.json"
        assert settings.required_assets == ("logo.png", "trans_logo.png", "favicon.ico")
        assert settings.max_image_bytes == 1024 * 1024

    @pytest.mark.unit
    def test_file_overrides_default(self, tmp_path: Path) -> None:
        _write_config(
            tmp_path,
            "public_dir: static\nrequired_assets: [logo.svg]\ntitle_max_length: 80\n",
        )

        settings = load_settings(tmp_path)

        assert settings.public_dir == "static"
        assert settings.required_assets == ("logo.svg",)
        assert settings.title_max_length == 80

    @pytest.mark.unit
    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_config(tmp_path, "public_dir: static\n")
        monkeypatch.setenv("BLOGCHECK_PUBLIC_DIR", "assets")

        assert load_settings(tmp_path).public_dir == "assets"

    @pytest.mark.unit
    def test_env_values_are_coerced(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("BLOGCHECK_MAX_IMAGE_MB", "2.5")
        monkeypatch.setenv("BLOGCHECK_CONTENT_MIN_LENGTH", "20")
        monkeypatch.setenv("BLOGCHECK_REQUIRED_ASSETS", "logo.png, favicon.ico,")

        settings = load_settings(tmp_path)

        assert settings.max_image_mb == 2.5
        assert settings.content_min_length == 20
        assert settings.required_assets == ("logo.png", "favicon.ico")

    @pytest.mark.unit
    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "theme: dark\n")

        assert load_settings(tmp_path) == Settings()

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "content",
        [
            "title_max_length: lots\n",
            "max_image_mb: true\n",
            "required_assets: 3\n",
            "public_dir: [a, b]\n",
        ],
    )
    def test_bad_values_raise(self, tmp_path: Path, content: str) -> None:
        _write_config(tmp_path, content)

        with pytest.raises(ConfigValueError) as exc_info:
            load_settings(tmp_path)
        assert exc_info.value.code == "BLOG-CFG002"
