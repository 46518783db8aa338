"""
app/renderer/offers.py — Offer cards and the footer call-to-action panel.

Offer cards come in four layouts:
  - no image : a single text cell
  - top      : full-width image row above the text row
  - right    : text cell, then a 240px image column
  - left     : 240px image column, then text cell (the default)
"""

from app.renderer.buttons import render_button
from app.renderer.design import ResolvedDesign
from app.renderer.models import FooterCta, ImagePosition, OfferData
from app.renderer.text import format_attr, format_text

SPACER_ROW = '<tr><td style="font-size: 20px; line-height: 20px;">&nbsp;</td></tr>'
FOOTER_GAP_ROW = '<tr><td style="font-size: 12px; line-height: 12px; height: 12px;">&nbsp;</td></tr>'

IMAGE_COLUMN_WIDTH = 240
# 600px container minus the outer and panel padding
FOOTER_BUTTON_WIDTH = 520

CARD_STYLE = (
    "padding: 20px; border: 1px solid #e2e8f0; border-radius: 8px; "
    "background-color: #ffffff;"
)


# ── Offer cards ───────────────────────────────────────────────────────────────

def _offer_text_cell(offer: OfferData, style: ResolvedDesign, cell_style: str = "") -> str:
    """Vehicle, title, details, button and disclaimer of one offer."""
    esc = style.escape
    button = ""
    if offer.cta_text and offer.cta_link:
        button = render_button(
            offer.cta_text,
            offer.cta_link,
            background=offer.cta_color or style.cta_color,
            width=150,
            height=40,
            font_size=14,
            arcsize=13,
            font_family=style.font_family,
            legacy_font=style.legacy_font,
            escape=esc,
        )
    disclaimer = ""
    if offer.disclaimer:
        disclaimer = (
            '<p style="margin: 15px 0 0 0; font-size: 11px; color: #718096; line-height: 1.5;">'
            f"{format_text(offer.disclaimer, esc)}</p>"
        )

    return (
        f'<td class="stack-column" valign="top" style="font-family: {format_attr(style.font_family, esc)}; '
        f'color: #333333;{cell_style}">'
        '<h3 style="margin: 0 0 5px 0; font-size: 16px; font-weight: bold; color: #4a5568;">'
        f"{format_text(offer.vehicle, esc)}</h3>"
        '<h2 style="margin: 0 0 10px 0; font-size: 20px; font-weight: bold; color: #1a202c;">'
        f"{format_text(offer.title, esc)}</h2>"
        '<p style="margin: 0 0 15px 0; font-size: 14px; line-height: 1.6;">'
        f"{format_text(offer.details, esc)}</p>"
        f"{button}{disclaimer}"
        "</td>"
    )


def _offer_image(offer: OfferData, style: ResolvedDesign, full_width: bool) -> str:
    src = format_attr(offer.image_data_url, style.escape)
    alt = format_attr(offer.title, style.escape)
    if full_width:
        return (
            f'<img src="{src}" alt="{alt}" width="100%" '
            'style="display: block; width: 100%; max-width: 100%; height: auto; '
            'border: 0; border-radius: 8px;">'
        )
    return (
        f'<img src="{src}" alt="{alt}" width="{IMAGE_COLUMN_WIDTH}" '
        f'style="display: block; width: 100%; max-width: {IMAGE_COLUMN_WIDTH}px; '
        'height: auto; border: 0; border-radius: 8px;">'
    )


def _offer_rows(offer: OfferData, style: ResolvedDesign) -> str:
    """Inner table rows of a card, laid out by image presence and position."""
    if not offer.image_data_url:
        return f"<tr>{_offer_text_cell(offer, style)}</tr>"

    if offer.image_position == ImagePosition.TOP:
        return (
            f"<tr><td>{_offer_image(offer, style, full_width=True)}</td></tr>"
            f"<tr>{_offer_text_cell(offer, style, ' padding-top: 15px;')}</tr>"
        )

    image = _offer_image(offer, style, full_width=False)
    if offer.image_position == ImagePosition.RIGHT:
        text_cell = _offer_text_cell(offer, style, " padding-right: 20px;")
        image_cell = (
            f'<td class="stack-column" width="{IMAGE_COLUMN_WIDTH}" valign="top">{image}</td>'
        )
        return f"<tr>{text_cell}{image_cell}</tr>"

    image_cell = (
        f'<td class="stack-column" width="{IMAGE_COLUMN_WIDTH}" valign="top" '
        f'style="padding-right: 20px;">{image}</td>'
    )
    return f"<tr>{image_cell}{_offer_text_cell(offer, style)}</tr>"


def render_offer(offer: OfferData, style: ResolvedDesign) -> str:
    """
    Render one offer as a bordered card followed by a spacer row.

    Returns an empty string when vehicle, title and details are all empty,
    whatever else the offer carries.
    """
    if not offer.has_content:
        return ""
    return (
        "<tr>"
        f'<td class="offer-card" style="{CARD_STYLE}">'
        '<table role="presentation" border="0" cellpadding="0" cellspacing="0" width="100%">'
        f"{_offer_rows(offer, style)}"
        "</table>"
        "</td>"
        "</tr>"

    )


def render_offers(offers: list[OfferData], style: ResolvedDesign) -> str:
    """Render all offers in input order; empty string if none produce markup."""
    offers_html = "".join(render_offer(offer, style) for offer in offers)
    if not offers_html:
        return ""
    return (
        '<tr><td><table role="presentation" border="0" cellpadding="0" cellspacing="0" width="100%">'
        f"{offers_html}</table></td></tr>"
    )


# ── Footer CTAs ───────────────────────────────────────────────────────────────

def render_footer_ctas(ctas: list[FooterCta], style: ResolvedDesign) -> str:
    """
    Stack footer buttons inside one bordered panel.

    A gap row separates consecutive buttons; there is none after the last.
    """
    if not ctas:
        return ""

    rows = [
        "<tr><td>"
        + render_button(
            cta.text,
            cta.link,
            background=style.footer_background,
            text_color=style.footer_text_color,
            width=FOOTER_BUTTON_WIDTH,
            height=44,
            font_size=15,
            arcsize=10,
            font_family=style.font_family,
            legacy_font=style.legacy_font,
            fluid=True,
            escape=style.escape,
        )
        + "</td></tr>"
        for cta in ctas
    ]
    return (
        f'<tr><td class="footer-ctas" style="{CARD_STYLE}">'
        '<table role="presentation" border="0" cellpadding="0" cellspacing="0" width="100%">'
        f"{FOOTER_GAP_ROW.join(rows)}"
        "</table></td></tr>"
    )
