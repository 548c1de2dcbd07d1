"""Typed views over the blog content documents."""

from blogcheck.models.fields import FieldValue, Presence, probe, probe_text
from blogcheck.models.post import BlogPost
from blogcheck.models.promotion import (
    LegacyPromotion,
    Promotion,
    PromotionsDocument,
    PromotionSet,
    promotions_document_from_dict,
)

__all__ = [
    "BlogPost",
    "FieldValue",
    "LegacyPromotion",
    "Presence",
    "Promotion",
    "PromotionSet",
    "PromotionsDocument",
    "probe",
    "probe_text",
    "promotions_document_from_dict",
]
