"""Embedding a finished vCard as a base64 attachment of a vCalendar event.

Opening the event in a calendar client offers the attached ``.vcf`` for
import, which is how contacts are delivered to clients that refuse plain
``text/x-vcard`` downloads (notably iOS Safari).
"""

from __future__ import annotations

import base64
import datetime
import logging

from vcardgen.types import ATTACHMENT_CHUNK_WIDTH, VCALENDAR_VERSION

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "Europe/London"
DEFAULT_SUMMARY = "Click the attachment to save to your contacts"


def chunk_split(body: str, length: int = ATTACHMENT_CHUNK_WIDTH, end: str = "\n") -> str:
    """Insert *end* after every *length* characters of *body*, including the last chunk."""
    if length < 1:
        raise ValueError(f"Chunk length must be positive, got {length}")
    return "".join(body[i : i + length] + end for i in range(0, len(body), length))


def embed_base64(vcard_text: str) -> str:
    """Base64 encode *vcard_text* into space-prefixed 74-character lines.

    Every line is ``" " + chunk + "\\n"``.  This is the attachment's own
    folding rule and is independent of :func:`vcardgen.text.fold_line`.
    """
    b64 = base64.b64encode(vcard_text.encode("utf-8")).decode("ascii")
    return "".join(" " + line + "\n" for line in chunk_split(b64).splitlines() if line)


def render_vcalendar(
    vcard_text: str,
    filename: str,
    extension: str,
    *,
    timezone: str = DEFAULT_TIMEZONE,
    summary: str = DEFAULT_SUMMARY,
    now: datetime.datetime | None = None,
) -> str:
    """Wrap *vcard_text* in a VCALENDAR/VEVENT with an ``ATTACH`` property.

    The event starts at the current UTC minute and ends one second later.

    Returns:
        Complete vCalendar 2.0 string with LF line endings.
    """
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    base = now.astimezone(datetime.timezone.utc).strftime("%Y%m%dT%H%M")
    dtstart = f"{base}00"
    dtend = f"{base}01"

    attachment = embed_base64(vcard_text)
    logger.debug("Embedding %d-char vCard as %s.%s", len(vcard_text), filename, extension)

    return (
        "BEGIN:VCALENDAR\n"
        f"VERSION:{VCALENDAR_VERSION}\n"
        "BEGIN:VEVENT\n"
        f"DTSTART;TZID={timezone}:{dtstart}\n"
        f"DTEND;TZID={timezone}:{dtend}\n"
        f"SUMMARY:{summary}\n"
        f"DTSTAMP:{dtstart}Z\n"
        "ATTACH;VALUE=BINARY;ENCODING=BASE64;FMTTYPE=text/directory;\n"
        f" X-APPLE-FILENAME={filename}.{extension}:\n"
        f"{attachment}"
        "END:VEVENT\n"
        "END:VCALENDAR\n"
    )
