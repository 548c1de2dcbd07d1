"""Promotion entities and the two promotions.json layouts.

promotions.json exists in two shapes:

- current: ``{"promotions": {"<id>": {...}, ...}}``
- legacy:  ``{"currentPromotion": {...}}``

Both are loaded into a tagged variant (PromotionSet or LegacyPromotion) that
exposes the same ``entries()`` and ``required_fields`` so one validation core
serves both.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from blogcheck.errors import DocumentShapeError
from blogcheck.models.fields import probe

# Fields every promotion must carry, in report order
COMMON_REQUIRED_FIELDS: tuple[str, ...] = (
    "enabled",
    "code",
    "discount",
    "title",
    "returnGuestTitle",
    "validUntil",
    "validUntilFormatted",
    "blackoutDates",
    "bookingUrl",
    "restrictions",
)

BLACKOUT_REQUIRED_FIELDS: tuple[str, ...] = ("date", "name", "formatted")


@dataclass
class Promotion:
    """A promotion as far as its fields could be read.

    Attributes:
        key: Id of the promotion in the ``promotions`` mapping (None for legacy).
        enabled: True/False, or None if absent or not a boolean.
        applicable_posts: Post ids the promotion applies to (legacy format).
    """

    key: str | None
    enabled: bool | None = None
    applicable_posts: list[Any] | None = None

    @property
    def label(self) -> str:
        return "Promotion" if self.key is None else f'Promotion "{self.key}"'

    @property
    def is_enabled(self) -> bool:
        return self.enabled is True

    @property
    def is_disabled(self) -> bool:
        return self.enabled is False

    @classmethod
    def from_dict(cls, data: dict[str, Any], key: str | None = None) -> Promotion:
        """Create Promotion from a decoded JSON object.

        Args:
            data: Promotion object.
            key: Its id in the promotions mapping, or None for legacy.

        Returns:
            Promotion instance.
        """
        enabled = probe(data, "enabled", bool)
        applicable = probe(data, "applicablePosts", list)

        return cls(
            key=key,
            enabled=enabled.value if enabled.valid else None,
            applicable_posts=applicable.value if applicable.valid else None,
        )


@dataclass
class PromotionSet:
    """Current layout: promotions keyed by id."""

    promotions: dict[str, Any]

    legacy: ClassVar[bool] = False
    required_fields: ClassVar[tuple[str, ...]] = COMMON_REQUIRED_FIELDS + (
        "showBannerOnListing",
    )

    def entries(self) -> list[tuple[str | None, Any]]:
        """(key, raw promotion) pairs in sorted key order."""
        return [(key, self.promotions[key]) for key in sorted(self.promotions)]


@dataclass
class LegacyPromotion:
    """Legacy layout: a single ``currentPromotion`` object."""

    promotion: dict[str, Any]

    legacy: ClassVar[bool] = True
    required_fields: ClassVar[tuple[str, ...]] = COMMON_REQUIRED_FIELDS + ("applicablePosts",)

    def entries(self) -> list[tuple[str | None, Any]]:
        return [(None, self.promotion)]


PromotionsDocument = Union[PromotionSet, LegacyPromotion]


def promotions_document_from_dict(data: Any, name: str = "promotions.json") -> PromotionsDocument:
    """Pick the layout of a decoded promotions document.

    ``promotions`` takes precedence when both keys are present.

    Args:
        data: Decoded JSON document.
        name: File name used in error messages.

    Returns:
        PromotionSet or LegacyPromotion.

    Raises:
        DocumentShapeError: If neither layout matches.
    """
    if not isinstance(data, dict):
        raise DocumentShapeError(name, 'must contain a "promotions" object')

    if "promotions" in data:
        promotions = data["promotions"]
        if isinstance(promotions, list):
            raise DocumentShapeError(
                name, 'field "promotions" must be an object keyed by promotion ID, not an array'
            )
        if not isinstance(promotions, dict):
            raise DocumentShapeError(name, 'field "promotions" must be an object')
        return PromotionSet(promotions=promotions)

    if "currentPromotion" in data:
        current = data["currentPromotion"]
        if not isinstance(current, dict):
            raise DocumentShapeError(name, 'field "currentPromotion" must be an object')
        return LegacyPromotion(promotion=current)

    raise DocumentShapeError(name, 'must contain a "promotions" object')
