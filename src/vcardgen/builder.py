"""vCard 3.0 record builder with optional vCalendar wrapping.

Convenience methods (``add_name``, ``add_email``, ...) each store one
property (two for URL items) under a logical element name.  Single-valued
elements raise :class:`~vcardgen.errors.DuplicateElementError` when set
twice; see :data:`~vcardgen.types.REPEATABLE_ELEMENTS` for the rest.

Example::

    card = VCard()
    card.add_name("Doe", "John").add_email("john@example.com")
    text = card.get_output()
"""

from __future__ import annotations

import base64
import logging
from typing import Sequence

from vcardgen.config import CardConfig, parse_format
from vcardgen.embed import render_vcalendar
from vcardgen.media import normalize_mime_type, sniff_mime_type
from vcardgen.store import PropertyStore
from vcardgen.text import fold_line, render_value
from vcardgen.types import CONTENT_TYPES, VCARD_VERSION, OutputFormat, Property, utc_timestamp

logger = logging.getLogger(__name__)


def _with_type(prefix: str, type_: str) -> str:
    """Append a TYPE parameter list to *prefix*.

    Raises:
        ValueError: If *type_* contains a line break or colon, which would
            end the key early.
    """
    if any(char in type_ for char in "\r\n:"):
        raise ValueError(f"Invalid type parameter {type_!r} for {prefix}")
    return f"{prefix};{type_}" if type_ else prefix


class VCard:
    """Accumulates contact properties and renders them as vCard or vCalendar."""

    file_extension = "vcf"

    def __init__(self, format: OutputFormat | str | None = None, config: CardConfig | None = None) -> None:
        self.config = config or CardConfig()
        self.charset: str = self.config.charset
        self.filename: str = self.config.filename
        self._store = PropertyStore()
        self.format = OutputFormat.VCARD
        self.set_format(format if format is not None else self.config.format)

    # ------------------------------------------------------------------
    # Mode and metadata
    # ------------------------------------------------------------------

    def set_format(self, format: OutputFormat | str = OutputFormat.VCARD) -> None:
        """Switch between plain card and calendar-wrapped output.

        Raises:
            ValueError: If *format* is not ``vcard`` or ``vcalendar``.
        """
        self.format = parse_format(format)

    @property
    def use_vcalendar(self) -> bool:
        return self.format is OutputFormat.VCALENDAR

    def get_content_type(self) -> str:
        return CONTENT_TYPES[self.format]

    def get_charset(self) -> str:
        return self.charset

    def set_charset(self, charset: str) -> None:
        self.charset = charset

    def get_charset_string(self) -> str:
        """Return the ``;CHARSET=`` parameter for text properties, if any."""
        if self.charset == "utf-8":
            return f";CHARSET={self.charset}"
        return ""

    def get_filename(self) -> str:
        return self.filename

    def set_filename(self, value: str) -> None:
        """Set the download file name (without extension); empty values are ignored."""
        if not value:
            return
        self.filename = value

    def get_file_extension(self) -> str:
        return self.file_extension

    # ------------------------------------------------------------------
    # Property store access
    # ------------------------------------------------------------------

    def set_property(
        self,
        element: str,
        key: str,
        value: str,
        components: tuple[str, ...] | None = None,
        separator: str = ";",
    ) -> None:
        self._store.set_property(element, key, value, components, separator)

    def has_property(self, key: str) -> bool:
        return self._store.has_property(key)

    def get_properties(self) -> list[Property]:
        return self._store.get_properties()

    def _set_structured(self, element: str, key: str, components: Sequence[str], separator: str = ";") -> None:
        parts = tuple(components)
        self.set_property(element, key, separator.join(parts), parts, separator)

    # ------------------------------------------------------------------
    # Convenience builders
    # ------------------------------------------------------------------

    def add_name(
        self,
        last_name: str = "",
        first_name: str = "",
        additional: str = "",
        prefix: str = "",
        suffix: str = "",
    ) -> VCard:
        """Add ``N``, and ``FN`` unless a full name was already set."""
        charset = self.get_charset_string()
        self._set_structured(
            "name",
            f"N{charset}",
            (last_name, first_name, additional, prefix, suffix),
        )

        if not self._store.has_element("fullname"):
            parts = [prefix, first_name, additional, last_name, suffix]
            full_name = " ".join(p for p in parts if p).strip()
            self.set_property("fullname", f"FN{charset}", full_name)

        return self

    def add_full_name(self, name: str) -> VCard:
        self.set_property("fullname", f"FN{self.get_charset_string()}", name)
        return self

    def add_address(
        self,
        name: str = "",
        extended: str = "",
        street: str = "",
        city: str = "",
        region: str = "",
        zip: str = "",
        country: str = "",
        type: str = "WORK;POSTAL",
    ) -> VCard:
        self._set_structured(
            "address",
            _with_type("ADR", type) + self.get_charset_string(),
            (name, extended, street, city, region, zip, country),
        )
        return self

    def add_birthday(self, date: str) -> VCard:
        self.set_property("birthday", "BDAY", date)
        return self

    def add_company(self, company: str, department: str = "") -> VCard:
        components = (company, department) if department else (company,)
        self._set_structured("company", f"ORG{self.get_charset_string()}", components)
        return self

    def add_email(self, address: str, type: str = "") -> VCard:
        self.set_property("email", _with_type("EMAIL;INTERNET", type), address)
        return self

    def add_job_title(self, job_title: str) -> VCard:
        self.set_property("jobtitle", f"TITLE{self.get_charset_string()}", job_title)
        return self

    def add_role(self, role: str) -> VCard:
        self.set_property("role", f"ROLE{self.get_charset_string()}", role)
        return self

    def add_note(self, note: str) -> VCard:
        self.set_property("note", f"NOTE{self.get_charset_string()}", note)
        return self

    def add_categories(self, categories: Sequence[str] | str) -> VCard:
        """Add ``CATEGORIES``; a single string is one category."""
        if isinstance(categories, str):
            categories = [categories]
        self._set_structured(
            "categories",
            f"CATEGORIES{self.get_charset_string()}",
            [c.strip() for c in categories],
            separator=",",
        )
        return self

    def add_phone_number(self, number: int | str, type: str = "") -> VCard:
        self.set_property("phoneNumber", _with_type("TEL", type), str(number))
        return self

    def add_url(self, url: str, type: str = "") -> VCard:
        self.set_property("url", _with_type("URL", type), url)
        return self

    def add_url_item(self, url: str, label: str = "", index: int | str = "") -> VCard:
        """Add an Apple-style labelled URL (``itemN.URL`` + ``itemN.X-ABLabel``)."""
        self.set_property("item", f"item{index}.URL", url)
        self.set_property("item", f"item{index}.X-ABLabel", label)
        return self

    def add_logo_url(self, url: str) -> VCard:
        return self._add_media_url("LOGO", url, "logo")

    def add_logo(self, image: bytes | str, mime: str | None = None) -> VCard:
        return self._add_media_content("LOGO", image, mime, "logo")

    def add_photo_url(self, url: str) -> VCard:
        return self._add_media_url("PHOTO", url, "photo")

    def add_photo(self, image: bytes | str, mime: str | None = None) -> VCard:
        """Embed a photo.

        *image* is either raw image bytes (base64 encoded here; the type is
        detected when *mime* is omitted) or an already base64-encoded string
        (type defaults to JPEG).
        """
        return self._add_media_content("PHOTO", image, mime, "photo")

    def _add_media_url(self, prop: str, url: str, element: str) -> VCard:
        self.set_property(element, f"{prop};VALUE=uri", url)
        return self

    def _add_media_content(self, prop: str, content: bytes | str, mime: str | None, element: str) -> VCard:
        if isinstance(content, bytes):
            subtype = normalize_mime_type(mime) if mime else sniff_mime_type(content)
            content = base64.b64encode(content).decode("ascii")
        else:
            subtype = normalize_mime_type(mime or "JPEG")

        self.set_property(element, f"{prop};ENCODING=b;TYPE={subtype}", content)
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def build_vcard(self) -> str:
        """Render the stored properties as a vCard 3.0 document.

        Returns:
            Complete vCard string with CRLF line endings.
        """
        lines: list[str] = [
            fold_line("BEGIN:VCARD"),
            fold_line(f"VERSION:{VCARD_VERSION}"),
            fold_line(f"REV:{utc_timestamp()}"),
        ]
        for prop in self._store:
            value = render_value(prop.value, prop.components, prop.separator)
            lines.append(fold_line(f"{prop.key}:{value}"))
        lines.append(fold_line("END:VCARD"))

        logger.debug("Built vCard with %d properties", len(self._store))
        return "".join(lines)

    def build_vcalendar(self) -> str:
        """Render the vCard wrapped as an attachment of a vCalendar event."""
        return render_vcalendar(
            self.build_vcard(),
            self.get_filename(),
            self.get_file_extension(),
            timezone=self.config.timezone,
            summary=self.config.summary,
        )

    def get_output(self) -> str:
        return self.build_vcalendar() if self.use_vcalendar else self.build_vcard()

    def __str__(self) -> str:
        return self.get_output()
