"""
tests/conftest.py — Shared pytest configuration and fixtures.

Pins the environment BEFORE any app module is imported, so a developer's
own .env or shell settings can't change the defaults the tests assert on.
"""

import os
import pytest

# ── Set env vars before any app module is imported ───────────────────────────
# This runs at collection time, before tests execute.
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("ESCAPE_USER_TEXT", "true")
os.environ.setdefault("DOWNLOAD_FILENAME", "email-template")
os.environ.setdefault("MAX_IMAGE_BYTES", str(5 * 1024 * 1024))

# Base64 of the 4-byte PNG signature prefix; nothing decodes the image
PNG_DATA_URL = "data:image/png;base64,iVBORw=="


@pytest.fixture
def png_data_url():
    return PNG_DATA_URL


@pytest.fixture
def full_form_fields():
    """A builder form with every block filled in."""
    return {
        "subject": "Spring Event",
        "body": "Hello,\r\nSpring is here.",
        "body_bg_color": "#000000",
        "cta": "Book a test drive",
        "cta_link": "https://dealer.example.com/book",
        "cta_color": "#ff6600",
        "disclaimer": "Terms apply.",
        "font_family": "Georgia, serif",
        "offer_vehicle_1": "2025 Roadster",
        "offer_title_1": "0% APR",
        "offer_details_1": "For 60 months\non approved credit",
        "offer_image_position_1": "top",
        "offer_cta_text_1": "See offer",
        "offer_cta_link_1": "https://dealer.example.com/roadster",
        "offer_title_3": "Lease special",
        "footer_cta_text_1": "Visit us",
        "footer_cta_link_1": "https://dealer.example.com",
        "footer_cta_text_2": "Call now",
        "footer_cta_link_3": "tel:5550100",
        "footer_bg_color": "#111111",
        "footer_text_color": "#eeeeee",
    }
