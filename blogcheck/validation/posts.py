"""Blog posts stage.

Checks every post in blog-posts.json for required fields, types, unique ids,
date format and optional-field sanity. A document-level problem (missing
file, bad JSON, no ``posts`` array) stops this stage after one error; per-post
problems are recorded and checking continues with the next post.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any

from blogcheck.config import Settings
from blogcheck.documents import load_posts_list
from blogcheck.errors import DocumentError
from blogcheck.models.fields import is_date_shaped, parse_date, probe, probe_text
from blogcheck.models.post import BlogPost
from blogcheck.validation.results import DiagnosticCollector

logger = logging.getLogger(__name__)


def validate_posts(
    root: Path,
    collector: DiagnosticCollector,
    settings: Settings | None = None,
    *,
    today: date | None = None,
) -> list[BlogPost]:
    """Validate the blog posts document.

    Args:
        root: Content root directory.
        collector: Receives every diagnostic.
        settings: Validator settings (defaults if None).
        today: Reference day for the future-date note (defaults to today).

    Returns:
        One BlogPost per object entry, for the asset stage. Empty if the
        document could not be read.
    """
    settings = settings or Settings()
    today = today or date.today()
    name = settings.posts_file

    collector.note(f"Validating {name}...")

    try:
        raw_posts = load_posts_list(root, name)
    except DocumentError as e:
        collector.error(e.message)
        return []

    if not raw_posts:
        collector.warn(f"No blog posts found in {name}")
        return []

    seen_ids: set[int] = set()
    seen_titles: set[str] = set()
    posts: list[BlogPost] = []

    for position, raw in enumerate(raw_posts, start=1):
        if not isinstance(raw, dict):
            collector.error(f"Post #{position}: Entry must be an object")
            continue
        post = BlogPost.from_dict(raw, position)
        _check_post(raw, post.label, collector, settings, today, seen_ids, seen_titles)
        posts.append(post)

    logger.debug("Checked %d post entries, %d unique ids", len(raw_posts), len(seen_ids))
    collector.success(f"Validated {len(raw_posts)} blog post(s)")
    return posts


def _check_post(
    raw: dict[str, Any],
    label: str,
    collector: DiagnosticCollector,
    settings: Settings,
    today: date,
    seen_ids: set[int],
    seen_titles: set[str],
) -> None:
    _check_id(raw, label, collector, seen_ids)

    title = _require_text(raw, "title", label, collector)
    if title is not None:
        if len(title) > settings.title_max_length:
            collector.warn(
                f"{label}: Title is very long ({len(title)} chars). "
                "Consider shortening for better display."
            )
        if title.lower() in seen_titles:
            collector.warn(f'{label}: Duplicate title detected: "{title}"')
        seen_titles.add(title.lower())

    excerpt = _require_text(raw, "excerpt", label, collector)
    if excerpt is not None and len(excerpt) > settings.excerpt_max_length:
        collector.warn(
            f"{label}: Excerpt is very long ({len(excerpt)} chars). "
            f"Consider shortening to {settings.excerpt_max_length} chars or less."
        )

    content = _require_text(raw, "content", label, collector)
    if content is not None and len(content.strip()) < settings.content_min_length:
        collector.warn(
            f"{label}: Content is very short ({len(content.strip())} chars). "
            "Consider adding more content."
        )

    post_date = _require_text(raw, "date", label, collector)
    if post_date is not None:
        _check_date(post_date, label, collector, today)

    category = _require_text(raw, "category", label, collector)
    if category is not None and not category.strip():
        collector.error(f'{label}: Field "category" cannot be empty')

    _check_optional_fields(raw, label, collector)


def _check_id(
    raw: dict[str, Any],
    label: str,
    collector: DiagnosticCollector,
    seen_ids: set[int],
) -> None:
    post_id = probe(raw, "id", int)
    if post_id.absent:
        collector.error(f'{label}: Missing required field "id"')
    elif post_id.wrong_type:
        collector.error(f'{label}: Field "id" must be an integer')
    elif post_id.value in seen_ids:
        collector.error(f"{label}: Duplicate ID {post_id.value} detected")
    else:
        seen_ids.add(post_id.value)


def _require_text(
    raw: dict[str, Any],
    name: str,
    label: str,
    collector: DiagnosticCollector,
) -> str | None:
    """Return the text value of a required field, or record why there is none."""
    field = probe_text(raw, name)
    if field.absent:
        collector.error(f'{label}: Missing required field "{name}"')
        return None
    if field.wrong_type:
        collector.error(f'{label}: Field "{name}" must be text')
        return None
    return field.value


def _check_date(value: str, label: str, collector: DiagnosticCollector, today: date) -> None:
    if not is_date_shaped(value):
        collector.error(
            f'{label}: Invalid date format "{value}". Must be YYYY-MM-DD (e.g., 2025-10-15)'
        )
        return

    parsed = parse_date(value)
    if parsed is None:
        collector.error(f'{label}: Invalid date "{value}"')
    elif parsed > today:
        collector.info(f"{label}: Post is scheduled for future publication ({value})")


def _check_optional_fields(
    raw: dict[str, Any],
    label: str,
    collector: DiagnosticCollector,
) -> None:
    """Absence is always fine here; only malformed values are reported.

    Whether an image path resolves is checked by the asset stage.
    """
    image = probe(raw, "image", str)
    if image.wrong_type:
        collector.error(f'{label}: Field "image" must be a file path')

    author = probe(raw, "author", str)
    if author.wrong_type:
        collector.warn(f'{label}: Field "author" must be text')
    elif author.valid and not author.value.strip():
        collector.warn(f'{label}: Field "author" is empty, consider removing or filling it')

    promotion_id = probe(raw, "promotionId", str)
    if promotion_id.wrong_type or (promotion_id.valid and not promotion_id.value.strip()):
        collector.error(f'{label}: Field "promotionId" must be a non-empty string')
