"""Core types, constants, and utility functions for vcardgen."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, Iterator


# Record versions
VCARD_VERSION = "3.0"
VCALENDAR_VERSION = "2.0"

# Maximum octets per physical content line (RFC 2426 section 2.6)
MAX_LINE_OCTETS = 75

# Width of each base64 chunk inside the calendar attachment
ATTACHMENT_CHUNK_WIDTH = 74

# Logical elements that may be set more than once
REPEATABLE_ELEMENTS = frozenset({"email", "address", "phoneNumber", "url", "item"})


class OutputFormat(str, Enum):
    """Output formats a :class:`~vcardgen.builder.VCard` can render.

    Using ``str, Enum`` so that ``OutputFormat.VCARD == "vcard"`` is True.
    """

    VCARD = "vcard"
    VCALENDAR = "vcalendar"


CONTENT_TYPES = {
    OutputFormat.VCARD: "text/x-vcard",
    OutputFormat.VCALENDAR: "text/x-vcalendar",
}


@dataclass(frozen=True)
class Property:
    """A single stored record line before escaping and folding.

    ``value`` is the unescaped semantic value.  Structured values (``N``,
    ``ADR``, ``ORG``, ``CATEGORIES``) also keep their ``components`` so each
    part can be escaped on its own and joined with the bare ``separator``.
    """

    key: str
    value: str
    components: tuple[str, ...] | None = None
    separator: str = ";"


class ElementSet:
    """Set of logical element names that have at least one property."""

    def __init__(self, elements: Iterable[str] = ()) -> None:
        self._elements: set[str] = set(elements)

    def add(self, element: str) -> None:
        self._elements.add(element)

    def __contains__(self, element: object) -> bool:
        return element in self._elements

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._elements))

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"ElementSet({sorted(self._elements)!r})"


def utc_timestamp(now: datetime | None = None) -> str:
    """Return a UTC timestamp: ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    if now is None:
        now = datetime.now(timezone.utc)
    ts = now.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return ts.replace("+00:00", "Z")
