"""Reading back rendered vCards and vCalendar attachments.

Used to check output produced by :class:`~vcardgen.builder.VCard`, and by
callers that receive a calendar-wrapped card and need the card itself.
"""

from __future__ import annotations

import base64
import binascii
import re

from vcardgen.text import unescape_value

_NEWLINE = re.compile(r"\r\n?")
_CONTINUATION = re.compile(r"\n[ \t]")


# ---------------------------------------------------------------------------
# Line unfolding (RFC 2426)
# ---------------------------------------------------------------------------


def unfold_lines(text: str) -> str:
    """Unfold vCard continuation lines per RFC 2426.

    Any newline followed by a single SPACE or TAB is removed together with
    that whitespace character.  Line endings are normalized to ``\\n``.
    """
    return _CONTINUATION.sub("", _NEWLINE.sub("\n", text))


# ---------------------------------------------------------------------------
# vCard parsing
# ---------------------------------------------------------------------------


def parse_vcard(text: str) -> list[tuple[str, str]]:
    """Parse a vCard 3.0 text blob into ``(key, value)`` pairs.

    Keys keep their parameters (``EMAIL;INTERNET``); values are unescaped.
    ``BEGIN``/``END`` lines are not included.  Pairs keep document order.
    """
    properties: list[tuple[str, str]] = []
    in_vcard = False

    for line in unfold_lines(text).split("\n"):
        if not line:
            continue

        if line.upper() == "BEGIN:VCARD":
            in_vcard = True
            continue
        if line.upper() == "END:VCARD":
            break
        if not in_vcard:
            continue

        colon_idx = line.find(":")
        if colon_idx < 0:
            continue

        properties.append((line[:colon_idx], unescape_value(line[colon_idx + 1:])))

    return properties


# ---------------------------------------------------------------------------
# vCalendar attachment extraction
# ---------------------------------------------------------------------------


def extract_attachment(vcalendar_text: str) -> str:
    """Decode the vCard carried by the ``ATTACH`` property of a vCalendar.

    Raises:
        ValueError: If no base64 ``ATTACH`` property is found or its payload
            is not valid base64.
    """
    for line in unfold_lines(vcalendar_text).split("\n"):
        if not line.upper().startswith("ATTACH;"):
            continue

        colon_idx = line.rfind(":")
        payload = line[colon_idx + 1:]
        try:
            return base64.b64decode(payload, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise ValueError(f"Invalid ATTACH payload: {exc}") from exc

    raise ValueError("No ATTACH property found in vCalendar")
