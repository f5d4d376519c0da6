"""vcardgen exception hierarchy.

All library-specific exceptions inherit from :class:`VCardError`.
"""

from __future__ import annotations


class VCardError(Exception):
    """Base exception for all vcardgen errors."""


class DuplicateElementError(VCardError):
    """Raised when a single-valued element is set a second time."""

    def __init__(self, element: str) -> None:
        super().__init__(f"This element already exists ({element})")
        self.element = element


class InvalidMediaTypeError(VCardError):
    """Raised when a media MIME type is not in the recognized set."""

    def __init__(self, mime: str) -> None:
        super().__init__(f"The MIME Media Type is invalid ({mime})")
        self.mime = mime
