"""vcardgen -- vCard 3.0 builder with vCalendar attachment wrapping.

Public API re-exports::

    from vcardgen import VCard
    card = VCard("vcalendar").add_name("Doe", "John")
"""

__version__ = "0.1.0"

from vcardgen.types import (
    VCARD_VERSION,
    MAX_LINE_OCTETS,
    REPEATABLE_ELEMENTS,
    OutputFormat,
    Property,
    ElementSet,
    utc_timestamp,
)

from vcardgen.errors import (
    VCardError,
    DuplicateElementError,
    InvalidMediaTypeError,
)

from vcardgen.text import escape_value, unescape_value, fold_line
from vcardgen.store import PropertyStore
from vcardgen.embed import chunk_split, embed_base64, render_vcalendar
from vcardgen.config import CardConfig
from vcardgen.builder import VCard
from vcardgen.parser import unfold_lines, parse_vcard, extract_attachment

__all__ = [
    "__version__",
    # Types
    "VCARD_VERSION",
    "MAX_LINE_OCTETS",
    "REPEATABLE_ELEMENTS",
    "OutputFormat",
    "Property",
    "ElementSet",
    "utc_timestamp",
    # Errors
    "VCardError",
    "DuplicateElementError",
    "InvalidMediaTypeError",
    # Text
    "escape_value",
    "unescape_value",
    "fold_line",
    # Store
    "PropertyStore",
    # Embedding
    "chunk_split",
    "embed_base64",
    "render_vcalendar",
    # Builder
    "CardConfig",
    "VCard",
    # Parser
    "unfold_lines",
    "parse_vcard",
    "extract_attachment",
]
