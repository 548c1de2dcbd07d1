"""Unit tests for blogcheck error classes.

Tests cover:
- Base BlogcheckError behavior
- Error code format (BLOG-{category}{number})
- Error to_dict serialization
"""

from __future__ import annotations

import re

import pytest

from blogcheck.errors import (
    BlogcheckError,
    ConfigError,
    ConfigParseError,
    ConfigValueError,
    ContentRootNotFoundError,
    DocumentError,
    DocumentNotFoundError,
    DocumentParseError,
    DocumentShapeError,
)

CODE_PATTERN = re.compile(r"^BLOG-[A-Z]{3}\d{3}$")


class TestBlogcheckError:
    """Tests for the base error class."""

    @pytest.mark.unit
    def test_message_and_code_in_str(self) -> None:
        err = BlogcheckError("Something broke")
        assert str(err) == "[BLOG-000] Something broke"
        assert err.message == "Something broke"

    @pytest.mark.unit
    def test_context_becomes_attributes(self) -> None:
        err = BlogcheckError("x", path="/tmp/a")
        assert err.path == "/tmp/a"  # type: ignore[attr-defined]
        assert err.context == {"path": "/tmp/a"}

    @pytest.mark.unit
    def test_reserved_context_keys_ignored(self) -> None:
        err = BlogcheckError("x", code="HACK")
        assert err.code == "BLOG-000"

    @pytest.mark.unit
    def test_to_dict(self) -> None:
        err = DocumentNotFoundError("blog-posts.json")
        assert err.to_dict() == {
            "code": "BLOG-DOC001",
            "message": "blog-posts.json file not found",
            "context": {"name": "blog-posts.json"},
        }


class TestErrorHierarchy:
    """Tests for the concrete errors."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "err",
        [
            DocumentNotFoundError("a.json"),
            DocumentParseError("a.json", "Expecting value"),
            DocumentShapeError("a.json", 'must contain a "posts" array'),
            ConfigParseError(".blogcheck.yaml", "bad indent"),
            ConfigValueError("max_image_mb", "big", "float"),
            ContentRootNotFoundError("site"),
        ],
    )
    def test_codes_are_structured(self, err: BlogcheckError) -> None:
        assert CODE_PATTERN.match(err.code)

    @pytest.mark.unit
    def test_document_errors_share_base(self) -> None:
        for err in (
            DocumentNotFoundError("a.json"),
            DocumentParseError("a.json", "x"),
            DocumentShapeError("a.json", "x"),
        ):
            assert isinstance(err, DocumentError)

    @pytest.mark.unit
    def test_config_errors_share_base(self) -> None:
        assert isinstance(ConfigParseError("c", "x"), ConfigError)
        assert isinstance(ConfigValueError("k", 1, "str"), ConfigError)

    @pytest.mark.unit
    def test_messages(self) -> None:
        assert (
            DocumentParseError("promotions.json", "Expecting value").message
            == "Failed to parse promotions.json: Expecting value"
        )
        assert (
            DocumentShapeError("blog-posts.json", 'must contain a "posts" array').message
            == 'blog-posts.json must contain a "posts" array'
        )
