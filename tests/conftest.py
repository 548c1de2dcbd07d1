"""Shared pytest fixtures for blogcheck tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import Any

import pytest

from blogcheck.validation.results import DiagnosticCollector

# Reference day for date checks in the unit tests
TODAY = date(2025, 6, 1)

# CLI runs use the real date, so promotions must stay valid past it
VALID_UNTIL_YEAR = max(date.today().year, TODAY.year) + 1

LONG_CONTENT = (
    "Harmony Apartments sit two blocks from the old harbour. "
    "This guide covers the best cafes within walking distance."
)


# =============================================================================
# Document Builders
# =============================================================================


def build_post(post_id: int = 1, **overrides: Any) -> dict[str, Any]:
    """A post that passes every check on its own."""
    post: dict[str, Any] = {
        "id": post_id,
        "title": f"Neighbourhood guide {post_id}",
        "excerpt": "Where to eat, drink and walk near the apartments.",
        "content": LONG_CONTENT,
        "date": "2025-01-15",
        "category": "Travel",
        "author": "Front Desk",
    }
    post.update(overrides)
    return post


def build_promotion(code: str = "SUMMER", **overrides: Any) -> dict[str, Any]:
    """A promotion that passes every check on its own."""
    promotion: dict[str, Any] = {
        "enabled": True,
        "code": code,
        "discount": "15% OFF",
        "title": "Summer Special",
        "returnGuestTitle": "Welcome back!",
        "validUntil": f"{VALID_UNTIL_YEAR}-12-31",
        "validUntilFormatted": f"December 31, {VALID_UNTIL_YEAR}",
        "blackoutDates": [
            {"date": "2025-07-04", "name": "Independence Day", "formatted": "July 4"},
        ],
        "bookingUrl": f"https://book.example.com/?promo={code}",
        "restrictions": "Not combinable with other offers.",
        "showBannerOnListing": True,
    }
    promotion.update(overrides)
    return promotion


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# =============================================================================
# Content Roots
# =============================================================================


@pytest.fixture
def collector() -> DiagnosticCollector:
    """A silent collector for inspecting recorded diagnostics."""
    return DiagnosticCollector(echo=False)


@pytest.fixture
def write_posts(tmp_path: Path) -> Callable[[list[Any]], Path]:
    """Write ``{"posts": [...]}`` to blog-posts.json under tmp_path."""

    def _write(posts: list[Any]) -> Path:
        return write_json(tmp_path / "blog-posts.json", {"posts": posts})

    return _write


@pytest.fixture
def write_promotions(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write ``{"promotions": {...}}`` to promotions.json under tmp_path."""

    def _write(promotions: dict[str, Any]) -> Path:
        return write_json(tmp_path / "promotions.json", {"promotions": promotions})

    return _write


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    """public/ with every expected static asset."""
    public = tmp_path / "public"
    public.mkdir()
    for name in ("logo.png", "trans_logo.png", "favicon.ico"):
        (public / name).write_bytes(b"\x89PNG")
    return public


@pytest.fixture
def valid_site(
    tmp_path: Path,
    public_dir: Path,
    write_posts: Callable[[list[Any]], Path],
    write_promotions: Callable[[dict[str, Any]], Path],
) -> Path:
    """A content root that validates with no errors and no warnings."""
    image = public_dir / "harbour.jpg"
    image.write_bytes(b"\xff\xd8" + b"\x00" * 1024)

    write_posts(
        [
            build_post(1, promotionId="SUMMER", image="public/harbour.jpg"),
            build_post(2),
        ]
    )
    write_promotions({"SUMMER": build_promotion("SUMMER")})
    return tmp_path


@pytest.fixture
def today() -> date:
    """Fixed reference day."""
    return TODAY


@pytest.fixture
def make_post() -> Callable[..., dict[str, Any]]:
    """Factory for valid post dicts; keyword arguments override fields."""
    return build_post


@pytest.fixture
def make_promotion() -> Callable[..., dict[str, Any]]:
    """Factory for valid promotion dicts; keyword arguments override fields."""
    return build_promotion
