"""Loading of the JSON content documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from blogcheck.errors import DocumentNotFoundError, DocumentParseError, DocumentShapeError

logger = logging.getLogger(__name__)


def load_document(root: Path, relative: str) -> Any:
    """Read and decode one JSON document under the content root.

    Args:
        root: Content root directory.
        relative: Document path relative to root (also used in messages).

    Returns:
        Decoded JSON value.

    Raises:
        DocumentNotFoundError: If the file does not exist.
        DocumentParseError: If the file cannot be read or is not valid JSON.
    """
    path = root / relative
    if not path.is_file():
        raise DocumentNotFoundError(relative)

    try:
        content = path.read_text(encoding="utf-8")
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise DocumentParseError(relative, str(e)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentParseError(relative, str(e)) from e

    logger.debug("Loaded %s (%d bytes)", path, len(content))
    return data


def load_posts_list(root: Path, relative: str) -> list[Any]:
    """Load the blog posts document and return its ``posts`` list.

    Raises:
        DocumentNotFoundError: If the file does not exist.
        DocumentParseError: If the file is not valid JSON.
        DocumentShapeError: If there is no ``posts`` array.
    """
    data = load_document(root, relative)
    posts = data.get("posts") if isinstance(data, dict) else None
    if not isinstance(posts, list):
        raise DocumentShapeError(relative, 'must contain a "posts" array')
    return posts
