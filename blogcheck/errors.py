"""Structured error codes for blogcheck.

All errors follow the format BLOG-{category}{number}:
- BLOG-DOC*: Content document errors (blog-posts.json, promotions.json)
- BLOG-DIR*: Content root errors
- BLOG-CFG*: Configuration errors

These never escape a validation stage. Each stage catches DocumentError and
turns it into a single error diagnostic. The CLI reports ConfigError and
ContentRootNotFoundError itself and exits before validation starts.
"""

from __future__ import annotations

from typing import Any


class BlogcheckError(Exception):
    """Base class for all blogcheck errors.

    All errors have:
    - code: Structured error code (e.g., BLOG-DOC001)
    - message: Human-readable error message
    """

    code: str = "BLOG-000"

    # Reserved attribute names that cannot be overwritten by context
    _RESERVED_ATTRS = frozenset({"code", "message", "context", "args"})

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize a blogcheck error.

        Args:
            message: Human-readable error message.
            **context: Additional context stored as error attributes.
                Reserved keys (code, message, context, args) are ignored.
        """
        self.message = message
        self.context = context
        for key, value in context.items():
            if key not in self._RESERVED_ATTRS:
                setattr(self, key, value)
        super().__init__(f"[{self.code}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """Convert error to JSON-serializable dict."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# Document Errors (BLOG-DOC*)
class DocumentError(BlogcheckError):
    """Base class for content document errors."""

    code = "BLOG-DOC000"


class DocumentNotFoundError(DocumentError):
    """Raised when a content document does not exist.

    Error code: BLOG-DOC001
    """

    code = "BLOG-DOC001"

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} file not found", name=name)


class DocumentParseError(DocumentError):
    """Raised when a content document is not valid JSON.

    Error code: BLOG-DOC002
    """

    code = "BLOG-DOC002"

    def __init__(self, name: str, parse_error: str) -> None:
        super().__init__(
            f"Failed to parse {name}: {parse_error}",
            name=name,
            parse_error=parse_error,
        )


class DocumentShapeError(DocumentError):
    """Raised when a document parses but has the wrong top-level shape.

    Error code: BLOG-DOC003
    """

    code = "BLOG-DOC003"

    def __init__(self, name: str, detail: str) -> None:
        super().__init__(f"{name} {detail}", name=name, detail=detail)


# Content root errors (BLOG-DIR*)
class ContentRootNotFoundError(BlogcheckError):
    """Raised when the content root passed to the CLI is not a directory.

    Error code: BLOG-DIR001
    """

    code = "BLOG-DIR001"

    def __init__(self, root: str) -> None:
        super().__init__(f"Content directory does not exist: {root}", root=root)


# Configuration Errors (BLOG-CFG*)
class ConfigError(BlogcheckError):
    """Base class for configuration-related errors."""

    code = "BLOG-CFG000"


class ConfigParseError(ConfigError):
    """Raised when a configuration file cannot be parsed.

    Error code: BLOG-CFG001
    """

    code = "BLOG-CFG001"

    def __init__(self, path: str, parse_error: str) -> None:
        super().__init__(
            f"Failed to parse config file {path}: {parse_error}",
            path=path,
            parse_error=parse_error,
        )


class ConfigValueError(ConfigError):
    """Raised when a setting value cannot be converted to its expected type.

    Error code: BLOG-CFG002
    """

    code = "BLOG-CFG002"

    def __init__(self, key: str, value: Any, expected: str) -> None:
        super().__init__(
            f"Invalid value for setting '{key}': {value!r} (expected {expected})",
            key=key,
            value=value,
            expected=expected,
        )
