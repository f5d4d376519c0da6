"""Tests for vcardgen.http -- serving cards as downloads."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from vcardgen.builder import VCard
from vcardgen.http import download_filename, to_response
from vcardgen.parser import extract_attachment


@pytest.fixture()
def client():
    """FastAPI app serving the same contact in both formats."""
    app = FastAPI()

    @app.get("/contact.vcf")
    def get_vcf():
        card = VCard()
        card.set_filename("john-doe")
        card.add_name("Doe", "John").add_email("john@example.com")
        return to_response(card)

    @app.get("/contact.ics")
    def get_ics():
        card = VCard("vcalendar")
        card.add_name("Doe", "John")
        return to_response(card)

    with TestClient(app) as c:
        yield c


class TestDownloadFilename:
    def test_vcard(self, card):
        assert download_filename(card) == "vcard.vcf"

    def test_vcalendar(self, calendar_card):
        assert download_filename(calendar_card) == "vcard.ics"


class TestToResponse:
    def test_vcard_download(self, client):
        resp = client.get("/contact.vcf")
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "text/x-vcard; charset=utf-8"
        assert resp.headers["content-disposition"] == 'attachment; filename="john-doe.vcf"'
        assert resp.text.startswith("BEGIN:VCARD\r\n")
        assert "EMAIL;INTERNET:john@example.com\r\n" in resp.text

    def test_vcalendar_download(self, client):
        resp = client.get("/contact.ics")
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "text/x-vcalendar; charset=utf-8"
        assert resp.headers["content-disposition"] == 'attachment; filename="vcard.ics"'
        assert resp.text.startswith("BEGIN:VCALENDAR\n")
        assert "FN;CHARSET=utf-8:John Doe" in extract_attachment(resp.text)

    def test_body_encoded_with_charset(self, card):
        card.add_note("Zoë")
        resp = to_response(card)
        assert "Zoë".encode("utf-8") in resp.body
