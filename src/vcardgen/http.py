"""HTTP delivery of a rendered card as a file download."""

from __future__ import annotations

from starlette.responses import Response

from vcardgen.builder import VCard


def download_filename(card: VCard) -> str:
    """File name offered to the client: ``.ics`` for calendar output, else ``.vcf``."""
    extension = "ics" if card.use_vcalendar else card.get_file_extension()
    return f"{card.get_filename()}.{extension}"


def to_response(card: VCard) -> Response:
    """Render *card* into a starlette/FastAPI ``Response`` served as an attachment."""
    return Response(
        content=card.get_output().encode(card.get_charset()),
        media_type=f"{card.get_content_type()}; charset={card.get_charset()}",
        headers={
            "Content-Disposition": f'attachment; filename="{download_filename(card)}"',
        },
    )
