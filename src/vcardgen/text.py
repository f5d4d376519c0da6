"""Value escaping and RFC 2426 line folding for vCard 3.0 content lines."""

from __future__ import annotations

import re

from vcardgen.types import MAX_LINE_OCTETS

# SPACE plus the longest UTF-8 sequence
_MIN_FOLD_WIDTH = 5


# ---------------------------------------------------------------------------
# Value escaping (RFC 2426 section 4, "text" value type)
# ---------------------------------------------------------------------------

_ESCAPES = {
    "\\": "\\\\",
    ",": "\\,",
    ";": "\\;",
    "\n": "\\n",
}


def escape_value(value: str) -> str:
    """Escape a raw property value for the value part of a content line.

    CRLF and bare CR are normalized to LF first, so the result never
    contains a line terminator.
    """
    value = re.sub(r"\r\n|\r", "\n", value)
    return "".join(_ESCAPES.get(char, char) for char in value)


def unescape_value(text: str) -> str:
    """Reverse :func:`escape_value`.

    ``\\n`` and ``\\N`` decode to a newline.  Unknown escape sequences are
    kept as they are.
    """
    chars: list[str] = []
    index = 0
    end = len(text)

    while index < end:
        char = text[index]
        index += 1

        if char == "\\" and index < end:
            next_char = text[index]
            index += 1

            if next_char in "\\,;":
                chars.append(next_char)
            elif next_char in "nN":
                chars.append("\n")
            else:
                chars.append(char)
                chars.append(next_char)
        else:
            chars.append(char)

    return "".join(chars)


def render_value(value: str, components: tuple[str, ...] | None = None, separator: str = ";") -> str:
    """Escape a value, escaping structured components one by one."""
    if components is None:
        return escape_value(value)
    return separator.join(escape_value(part) for part in components)


# ---------------------------------------------------------------------------
# Line folding (RFC 2426 section 2.6)
# ---------------------------------------------------------------------------


def fold_line(line: str, width: int = MAX_LINE_OCTETS) -> str:
    """Fold a vCard content line per RFC 2426.

    No physical line exceeds *width* octets of UTF-8.  Continuation lines
    start with a single SPACE, and every physical line ends with CRLF.  A
    trailing CRLF on the input is accepted and not counted.  Lines are only
    broken between characters, never inside a multi-byte sequence.

    Raises:
        ValueError: If *width* cannot hold a SPACE plus a 4-byte character.
    """
    if width < _MIN_FOLD_WIDTH:
        raise ValueError(f"Fold width must be at least {_MIN_FOLD_WIDTH}, got {width}")

    line = line.removesuffix("\r\n")
    parts: list[str] = []
    current: list[str] = []
    used = 0

    for char in line:
        size = len(char.encode("utf-8"))
        if used + size > width:
            parts.append("".join(current))
            current = [" "]
            used = 1
        current.append(char)
        used += size

    parts.append("".join(current))
    return "\r\n".join(parts) + "\r\n"
