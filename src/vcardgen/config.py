"""Builder configuration via dataclass, with environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from vcardgen.embed import DEFAULT_SUMMARY, DEFAULT_TIMEZONE
from vcardgen.types import OutputFormat

logger = logging.getLogger(__name__)

_DEFAULT_CHARSET = "utf-8"
_DEFAULT_FILENAME = "vcard"


@dataclass
class CardConfig:
    """Configuration for a :class:`~vcardgen.builder.VCard`.

    Fields left as ``None`` are read from ``VCARDGEN_*`` environment
    variables, then fall back to defaults.

    Priority (highest wins): constructor arg > env var > default.
    """

    format: OutputFormat | str | None = None
    charset: str | None = None
    filename: str | None = None
    timezone: str | None = None
    summary: str | None = None

    def __post_init__(self) -> None:
        if self.format is None:
            self.format = os.getenv("VCARDGEN_FORMAT", OutputFormat.VCARD.value)
        if self.charset is None:
            self.charset = os.getenv("VCARDGEN_CHARSET", _DEFAULT_CHARSET)
        if self.filename is None:
            self.filename = os.getenv("VCARDGEN_FILENAME", _DEFAULT_FILENAME)
        if self.timezone is None:
            self.timezone = os.getenv("VCARDGEN_TIMEZONE", DEFAULT_TIMEZONE)
        if self.summary is None:
            self.summary = os.getenv("VCARDGEN_SUMMARY", DEFAULT_SUMMARY)

        self.format = parse_format(self.format)

        if not self.filename:
            logger.warning("Empty filename configured, using %r", _DEFAULT_FILENAME)
            self.filename = _DEFAULT_FILENAME


def parse_format(value: OutputFormat | str) -> OutputFormat:
    """Coerce *value* to an :class:`OutputFormat`.

    Raises:
        ValueError: If *value* names no known format.
    """
    if isinstance(value, OutputFormat):
        return value
    try:
        return OutputFormat(str(value).strip().lower())
    except ValueError:
        raise ValueError(
            f"Invalid format '{value}'. "
            f"Must be one of: {sorted(f.value for f in OutputFormat)}"
        ) from None
