"""Assets stage.

Two checks:
- every image referenced by a post exists under the content root, with an
  advisory warning when it exceeds the configured size ceiling;
- the public directory holds the static files every page links to.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from blogcheck.config import BYTES_PER_MB, Settings
from blogcheck.models.post import BlogPost
from blogcheck.validation.results import DiagnosticCollector

logger = logging.getLogger(__name__)


def validate_assets(
    root: Path,
    posts: Sequence[BlogPost],
    collector: DiagnosticCollector,
    settings: Settings | None = None,
) -> None:
    """Run both asset checks.

    Args:
        root: Content root directory.
        posts: Posts returned by the posts stage.
        collector: Receives every diagnostic.
        settings: Validator settings (defaults if None).
    """
    settings = settings or Settings()
    collector.note(f"Validating post images and {settings.public_dir}/ directory...")
    check_post_images(root, posts, collector, settings)
    validate_public_assets(root, collector, settings)


def check_post_images(
    root: Path,
    posts: Sequence[BlogPost],
    collector: DiagnosticCollector,
    settings: Settings | None = None,
) -> None:
    """Check that each post image exists and is of a reasonable size."""
    settings = settings or Settings()
    checked = 0

    for post in posts:
        if not post.image:
            continue
        checked += 1
        # Site-absolute paths such as "/public/a.jpg" are served from the content root
        image_path = root / post.image.lstrip("/")
        if not image_path.is_file():
            collector.error(f'{post.label}: Referenced image "{post.image}" does not exist')
            continue

        size = image_path.stat().st_size
        if size > settings.max_image_bytes:
            collector.warn(
                f'{post.label}: Image "{post.image}" is large '
                f"({size / BYTES_PER_MB:.2f} MB). Consider optimizing for web."
            )

    logger.debug("Checked %d post image(s)", checked)


def validate_public_assets(
    root: Path,
    collector: DiagnosticCollector,
    settings: Settings | None = None,
) -> None:
    """Check the public directory and the static files it must contain.

    A missing directory is an error. A missing expected file is only a
    warning: pages still render, just without that asset.
    """
    settings = settings or Settings()
    public_dir = root / settings.public_dir

    if not public_dir.is_dir():
        collector.error(f"{settings.public_dir} directory not found")
        return

    for name in settings.required_assets:
        if not (public_dir / name).is_file():
            collector.warn(f'Expected file "{settings.public_dir}/{name}" not found')

    collector.success(f"{settings.public_dir.capitalize()} directory validated")
