"""
app/collector/form.py — Builds an EmailData record from flat form fields.

The builder form posts one field per input. Repeated blocks are numbered:
offer_title_1 ... offer_title_5, footer_cta_text_1 ... footer_cta_text_3.
Images arrive separately, already converted to data URLs.
"""

import logging
from typing import Mapping

from app.renderer.models import (
    MAX_FOOTER_CTAS,
    MAX_OFFERS,
    EmailData,
    FooterCta,
    ImagePosition,
    OfferData,
)

logger = logging.getLogger(__name__)

HERO_IMAGE_FIELD = "photo"


def offer_image_field(index: int) -> str:
    return f"offer_image_{index}"


def image_field_names() -> list[str]:
    """Every form field that may carry an image."""
    return [HERO_IMAGE_FIELD] + [offer_image_field(i) for i in range(1, MAX_OFFERS + 1)]


# ── Helpers ──────────────────────────────────────────────────────────────────

def _field(fields: Mapping[str, str], name: str) -> str:
    """Read a text field; missing and non-string values count as empty."""
    value = fields.get(name)
    return value.strip() if isinstance(value, str) else ""


def _text_block(fields: Mapping[str, str], name: str) -> str:
    """Multi-line field: keep inner newlines, normalize CRLF from browsers."""
    value = fields.get(name)
    if not isinstance(value, str):
        return ""
    return value.replace("\r\n", "\n").strip()


def _parse_image_position(value: str) -> ImagePosition:
    try:
        return ImagePosition(value.lower()) if value else ImagePosition.LEFT
    except ValueError:
        logger.debug("Unknown image position %r, using 'left'.", value)
        return ImagePosition.LEFT


# ── Blocks ───────────────────────────────────────────────────────────────────

def collect_offer(
    fields: Mapping[str, str],
    images: Mapping[str, str],
    index: int,
) -> OfferData | None:
    """
    Collect offer number `index`.

    Returns None when vehicle, title and details are all empty.
    """
    vehicle = _field(fields, f"offer_vehicle_{index}")
    title = _field(fields, f"offer_title_{index}")
    details = _text_block(fields, f"offer_details_{index}")

    if not (vehicle or title or details):
        return None

    return OfferData(
        vehicle=vehicle,
        title=title,
        details=details,
        image_position=_parse_image_position(_field(fields, f"offer_image_position_{index}")),
        cta_text=_field(fields, f"offer_cta_text_{index}"),
        cta_link=_field(fields, f"offer_cta_link_{index}"),
        cta_color=_field(fields, f"offer_cta_color_{index}"),
        disclaimer=_text_block(fields, f"offer_disclaimer_{index}"),
        image_data_url=images.get(offer_image_field(index), ""),
    )


def collect_footer_ctas(fields: Mapping[str, str]) -> list[FooterCta]:
    """Footer buttons in form order, skipping any without both text and link."""
    ctas = []
    for index in range(1, MAX_FOOTER_CTAS + 1):
        text = _field(fields, f"footer_cta_text_{index}")
        link = _field(fields, f"footer_cta_link_{index}")
        if text and link:
            ctas.append(FooterCta(text=text, link=link))
        elif text or link:
            logger.debug("Footer CTA %d skipped: needs both text and link.", index)
    return ctas


# ── Main function ────────────────────────────────────────────────────────────

def collect_email_data(
    fields: Mapping[str, str],
    images: Mapping[str, str] | None = None,
) -> EmailData:
    """
    Assemble the renderer input from submitted form values.

    Args:
        fields: Form field name -> submitted string.
        images: Image field name -> data URL (see image_field_names()).

    Returns:
        EmailData ready for rendering.
    """
    images = images or {}

    offers = []
    for index in range(1, MAX_OFFERS + 1):
        offer = collect_offer(fields, images, index)
        if offer:
            offers.append(offer)

    data = EmailData(
        subject=_field(fields, "subject"),
        body_content=_text_block(fields, "body"),
        body_background_color=_field(fields, "body_bg_color"),
        hero_image=images.get(HERO_IMAGE_FIELD, ""),
        cta_text=_field(fields, "cta"),
        cta_link=_field(fields, "cta_link"),
        cta_color=_field(fields, "cta_color"),
        disclaimer=_text_block(fields, "disclaimer"),
        font_family=_field(fields, "font_family"),
        offers=offers,
        footer_ctas=collect_footer_ctas(fields),
        footer_background_color=_field(fields, "footer_bg_color"),
        footer_cta_text_color=_field(fields, "footer_text_color"),
    )
    logger.debug(
        "Collected email %r: %d offers, %d footer CTAs, hero=%s.",
        data.subject, len(data.offers), len(data.footer_ctas), bool(data.hero_image),
    )
    return data
