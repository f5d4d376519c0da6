"""Shared test fixtures for vcardgen tests."""

from __future__ import annotations

import io

import pytest
from PIL import Image

from vcardgen.builder import VCard

FIXED_REV = "2026-10-18T12:34:56.789Z"


def _make_image(fmt: str) -> bytes:
    img = Image.new("RGB", (10, 10), (100, 150, 200))
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep VCARDGEN_* variables from the outer environment out of tests."""
    for name in ("FORMAT", "CHARSET", "FILENAME", "TIMEZONE", "SUMMARY"):
        monkeypatch.delenv(f"VCARDGEN_{name}", raising=False)


@pytest.fixture()
def tiny_jpeg() -> bytes:
    """Create a minimal JPEG for testing."""
    return _make_image("JPEG")


@pytest.fixture()
def tiny_png() -> bytes:
    return _make_image("PNG")


@pytest.fixture()
def fixed_rev(monkeypatch) -> str:
    """Pin the REV timestamp so repeated builds are byte-identical."""
    monkeypatch.setattr("vcardgen.builder.utc_timestamp", lambda: FIXED_REV)
    return FIXED_REV


@pytest.fixture()
def card() -> VCard:
    return VCard()


@pytest.fixture()
def calendar_card() -> VCard:
    return VCard("vcalendar")
