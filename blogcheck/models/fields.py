"""Explicit presence model for JSON object fields.

Content documents are plain JSON, so any field may be missing, null or of the
wrong type. Validators never index into raw dicts directly; they probe each
field once and branch on the resulting Presence.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any
from urllib.parse import urlparse

# ASCII digits only; \d would also accept other Unicode digits
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


class Presence(Enum):
    """Outcome of probing a single field."""

    ABSENT = "absent"
    WRONG_TYPE = "wrong_type"
    VALID = "valid"


@dataclass(frozen=True)
class FieldValue:
    """A probed field.

    Attributes:
        name: JSON key that was probed.
        presence: ABSENT, WRONG_TYPE or VALID.
        value: Raw value (None when absent).
    """

    name: str
    presence: Presence
    value: Any = None

    @property
    def absent(self) -> bool:
        return self.presence is Presence.ABSENT

    @property
    def valid(self) -> bool:
        return self.presence is Presence.VALID

    @property
    def wrong_type(self) -> bool:
        return self.presence is Presence.WRONG_TYPE


def probe(data: dict[str, Any], name: str, expected: type | tuple[type, ...]) -> FieldValue:
    """Probe ``data[name]`` against an expected JSON type.

    A missing key and an explicit null are both ABSENT. Booleans are never
    accepted where an int is expected, since JSON true/false decode to bool,
    a subclass of int.

    Args:
        data: Decoded JSON object.
        name: Key to look up.
        expected: Type or tuple of types the value must be an instance of.

    Returns:
        FieldValue describing the field.
    """
    if name not in data or data[name] is None:
        return FieldValue(name, Presence.ABSENT)

    value = data[name]
    expected_types = expected if isinstance(expected, tuple) else (expected,)
    if isinstance(value, bool) and bool not in expected_types:
        return FieldValue(name, Presence.WRONG_TYPE, value)
    if not isinstance(value, expected_types):
        return FieldValue(name, Presence.WRONG_TYPE, value)
    return FieldValue(name, Presence.VALID, value)


def probe_text(data: dict[str, Any], name: str) -> FieldValue:
    """Probe a required text field; the empty string counts as absent."""
    result = probe(data, name, str)
    if result.valid and result.value == "":
        return FieldValue(name, Presence.ABSENT)
    return result


def is_date_shaped(value: str) -> bool:
    """True if value looks like YYYY-MM-DD."""
    return DATE_PATTERN.fullmatch(value) is not None


def parse_date(value: str) -> date | None:
    """Parse a YYYY-MM-DD string into a calendar date.

    Returns:
        The date, or None if the string is date-shaped but not a real day
        (e.g. 2025-13-40) or not date-shaped at all.
    """
    if not is_date_shaped(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def is_absolute_url(value: Any) -> bool:
    """True if value is a string with both a scheme and a network location."""
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)
