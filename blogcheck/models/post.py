"""BlogPost entity built from one element of the ``posts`` list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from blogcheck.models.fields import probe, probe_text


@dataclass
class BlogPost:
    """A blog post as far as its fields could be read.

    Fields that were absent or of the wrong type are None; the post
    validator has already reported them.

    Attributes:
        position: 1-based position in the posts list.
        id: Integer post id.
        image: Relative path of the hero image.
        promotion_id: Key of the promotion this post references.
    """

    position: int
    id: int | None = None
    image: str | None = None
    promotion_id: str | None = None
    raw_id: Any = None

    @property
    def label(self) -> str:
        """Human label used as the prefix of every post diagnostic."""
        shown = self.raw_id if self.raw_id not in (None, "", 0, False) else "missing"
        return f"Post #{self.position} (ID: {shown})"

    @classmethod
    def from_dict(cls, data: dict[str, Any], position: int) -> BlogPost:
        """Create BlogPost from a decoded JSON object.

        Args:
            data: One element of the posts list.
            position: 1-based index in the list.

        Returns:
            BlogPost instance.
        """
        post_id = probe(data, "id", int)
        image = probe_text(data, "image")
        promotion_id = probe_text(data, "promotionId")
        return cls(
            position=position,
            id=post_id.value if post_id.valid else None,
            image=image.value if image.valid else None,
            promotion_id=promotion_id.value if promotion_id.valid else None,
            raw_id=data.get("id"),
        )
