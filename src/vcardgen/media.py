"""MIME type handling for embedded PHOTO and LOGO content."""

from __future__ import annotations

import io

from PIL import Image, UnidentifiedImageError

from vcardgen.errors import InvalidMediaTypeError

# Image subtypes accepted in the TYPE parameter of PHOTO/LOGO
MIME_TYPES = frozenset(
    {"JPEG", "JPG", "PNG", "GIF", "BMP", "TIFF", "WEBP", "ICO", "SVG+XML", "HEIC"}
)

# Pillow format names that differ from the TYPE parameter value
_PILLOW_FORMATS = {
    "MPO": "JPEG",
}


def normalize_mime_type(mime: str) -> str:
    """Return the TYPE parameter value for *mime*.

    Accepts both ``"jpeg"`` and ``"image/jpeg"`` forms.

    Raises:
        InvalidMediaTypeError: If the type is not in :data:`MIME_TYPES`.
    """
    subtype = mime.strip().upper()
    if subtype.startswith("IMAGE/"):
        subtype = subtype[len("IMAGE/"):]
    if subtype not in MIME_TYPES:
        raise InvalidMediaTypeError(mime)
    return subtype


def sniff_mime_type(data: bytes) -> str:
    """Detect the image type of *data* with Pillow.

    Raises:
        InvalidMediaTypeError: If Pillow cannot identify the image or its
            format is not in :data:`MIME_TYPES`.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            fmt = img.format or ""
    except (UnidentifiedImageError, OSError) as exc:
        raise InvalidMediaTypeError("unknown") from exc
    return normalize_mime_type(_PILLOW_FORMATS.get(fmt, fmt))
