"""Promotions stage.

Validates promotions.json in either layout, then cross-checks it against the
posts that reference promotions. The posts document is read again here rather
than shared with the posts stage; if it cannot be read the cross-check is
skipped, since the posts stage has already reported why.

The two layouts differ in how strictly they treat stale references: an
unknown ``promotionId`` on a post is an error, while an unknown id in the
legacy ``applicablePosts`` list is only a warning.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any

from blogcheck.config import Settings
from blogcheck.documents import load_document, load_posts_list
from blogcheck.errors import DocumentError
from blogcheck.models.fields import is_absolute_url, is_date_shaped, parse_date, probe_text
from blogcheck.models.post import BlogPost
from blogcheck.models.promotion import (
    BLACKOUT_REQUIRED_FIELDS,
    Promotion,
    PromotionsDocument,
    promotions_document_from_dict,
)
from blogcheck.validation.results import DiagnosticCollector

logger = logging.getLogger(__name__)

# Required fields that are shown to guests verbatim
DISPLAY_TEXT_FIELDS: tuple[str, ...] = (
    "code",
    "discount",
    "title",
    "returnGuestTitle",
    "validUntilFormatted",
    "restrictions",
)

BOOLEAN_FIELDS: tuple[str, ...] = ("enabled", "showBannerOnListing")


def validate_promotions(
    root: Path,
    collector: DiagnosticCollector,
    settings: Settings | None = None,
    *,
    today: date | None = None,
) -> list[Promotion]:
    """Validate the promotions document and its references from posts.

    Args:
        root: Content root directory.
        collector: Receives every diagnostic.
        settings: Validator settings (defaults if None).
        today: Reference day for the expiry check (defaults to today).

    Returns:
        One Promotion per object entry. Empty if the document could not be read.
    """
    settings = settings or Settings()
    today = today or date.today()
    name = settings.promotions_file

    collector.note(f"Validating {name}...")

    try:
        document = promotions_document_from_dict(load_document(root, name), name)
    except DocumentError as e:
        collector.error(e.message)
        return []

    entries = document.entries()
    if not entries:
        collector.warn(f"No promotions found in {name}")
        return []

    promotions: list[Promotion] = []
    for key, raw in entries:
        if not isinstance(raw, dict):
            collector.error(f'Promotion "{key}": Entry must be an object')
            continue
        _check_promotion(raw, key, document, collector, today)
        promotions.append(Promotion.from_dict(raw, key))

    raw_posts = _read_posts(root, settings.posts_file)
    if raw_posts is None:
        logger.debug("Skipping promotion cross-references: %s unreadable", settings.posts_file)
    elif document.legacy:
        _check_applicable_posts(promotions, raw_posts, collector)
    else:
        _check_post_references(document, promotions, raw_posts, collector)

    collector.success(f"Validated {len(entries)} promotion(s)")
    return promotions


def _check_promotion(
    raw: dict[str, Any],
    key: str | None,
    document: PromotionsDocument,
    collector: DiagnosticCollector,
    today: date,
) -> None:
    """Field checks shared by both layouts."""
    label = "Promotion" if key is None else f'Promotion "{key}"'

    for field in document.required_fields:
        if field not in raw:
            collector.error(f'{label}: Missing required field "{field}"')

    boolean_fields = ("enabled",) if document.legacy else BOOLEAN_FIELDS
    for field in boolean_fields:
        if field in raw and not isinstance(raw[field], bool):
            collector.error(f'{label}: Field "{field}" must be true or false')

    for field in DISPLAY_TEXT_FIELDS:
        if field in raw and not isinstance(raw[field], str):
            collector.error(f'{label}: Field "{field}" must be text')

    code = raw.get("code")
    if key is not None and isinstance(code, str) and code != key:
        collector.warn(f'{label}: Field "code" ("{code}") does not match its promotion ID')

    if "validUntil" in raw:
        _check_valid_until(raw["validUntil"], raw.get("enabled") is True, label, collector, today)

    if "blackoutDates" in raw:
        _check_blackout_dates(raw["blackoutDates"], label, collector)

    if "bookingUrl" in raw and not is_absolute_url(raw["bookingUrl"]):
        collector.error(f'{label}: Invalid bookingUrl "{raw["bookingUrl"]}"')

    applicable = raw.get("applicablePosts")
    if document.legacy and "applicablePosts" in raw and not isinstance(applicable, list):
        collector.error(f'{label}: Field "applicablePosts" must be an array')


def _check_valid_until(
    value: Any,
    enabled: bool,
    label: str,
    collector: DiagnosticCollector,
    today: date,
) -> None:
    if not isinstance(value, str) or not is_date_shaped(value):
        collector.error(f'{label}: Invalid validUntil format "{value}". Must be YYYY-MM-DD')
        return

    valid_until = parse_date(value)
    if valid_until is None:
        collector.error(f'{label}: Invalid validUntil date "{value}"')
    elif valid_until < today and enabled:
        collector.warn(f"{label}: validUntil date has passed, but promotion is still enabled")


def _check_blackout_dates(value: Any, label: str, collector: DiagnosticCollector) -> None:
    if not isinstance(value, list):
        collector.error(f'{label}: Field "blackoutDates" must be an array')
        return

    for index, entry in enumerate(value, start=1):
        if not isinstance(entry, dict):
            collector.error(f"{label}: Blackout date #{index} must be an object")
            continue
        missing = [f for f in BLACKOUT_REQUIRED_FIELDS if not probe_text(entry, f).valid]
        if missing:
            collector.error(
                f"{label}: Blackout date #{index} is missing required field(s): "
                f"{', '.join(missing)}"
            )


def _read_posts(root: Path, name: str) -> list[Any] | None:
    try:
        return load_posts_list(root, name)
    except DocumentError:
        return None


def _check_post_references(
    document: PromotionsDocument,
    promotions: list[Promotion],
    raw_posts: list[Any],
    collector: DiagnosticCollector,
) -> None:
    """Resolve each post's promotionId and note enabled promotions nobody uses."""
    by_key = {p.key: p for p in promotions}
    known_keys = {key for key, _ in document.entries()}
    referenced: set[str] = set()

    for position, raw in enumerate(raw_posts, start=1):
        if not isinstance(raw, dict):
            continue
        post = BlogPost.from_dict(raw, position)
        promotion_id = post.promotion_id
        if promotion_id is None or not promotion_id.strip():
            continue

        referenced.add(promotion_id)
        if promotion_id not in known_keys:
            collector.error(
                f'{post.label}: promotionId "{promotion_id}" does not match any promotion'
            )
            continue

        promotion = by_key.get(promotion_id)
        if promotion is not None and promotion.is_disabled:
            collector.warn(
                f'{post.label}: references promotion "{promotion_id}", which is disabled'
            )

    for promotion in promotions:
        if promotion.is_enabled and promotion.key not in referenced:
            collector.info(f"{promotion.label} is enabled but not referenced by any post")


def _check_applicable_posts(
    promotions: list[Promotion],
    raw_posts: list[Any],
    collector: DiagnosticCollector,
) -> None:
    """Legacy layout: every id in applicablePosts should name an existing post."""
    post_ids = {
        raw["id"]
        for raw in raw_posts
        if isinstance(raw, dict) and _is_post_id(raw.get("id"))
    }

    for promotion in promotions:
        for post_id in promotion.applicable_posts or []:
            if not _is_post_id(post_id) or post_id not in post_ids:
                collector.warn(f"{promotion.label}: References non-existent post ID {post_id}")


def _is_post_id(value: Any) -> bool:
    # bool is an int subclass, and True == 1
    return isinstance(value, (int, str)) and not isinstance(value, bool)
