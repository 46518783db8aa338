"""
app/services/email_service.py — Render orchestration for the API and CLI.

Builds the DesignSettings from configuration, runs the pure renderer and
packages the result with a plain-text version and a download file name.
"""

import logging
import re
from dataclasses import dataclass

from app.config import Settings, settings
from app.renderer.design import DesignSettings
from app.renderer.models import EmailData
from app.renderer.templates import render_email_html
from app.renderer.text import html_to_plain_text

logger = logging.getLogger(__name__)


@dataclass
class RenderedEmail:
    """Final email ready to be previewed, copied or downloaded."""
    subject: str
    html_body: str
    plain_body: str
    filename: str

    @property
    def size_bytes(self) -> int:
        return len(self.html_body.encode("utf-8"))


def design_from_settings(config: Settings | None = None) -> DesignSettings:
    """Turn the configured defaults into the value the renderer expects."""
    config = config or settings
    return DesignSettings(
        cta_color=config.default_cta_color,
        body_background=config.default_body_background,
        font_family=config.default_font_family,
        footer_background=config.default_footer_background,
        footer_text_color=config.default_footer_text_color,
        escape_text=config.escape_user_text,
    )


def download_filename(subject: str, fallback: str | None = None) -> str:
    """
    Derive an .html file name from the subject line.

    'Summer Sale — 20% off!' -> 'summer-sale-20-off.html'
    """
    stem = re.sub(r"[^a-z0-9]+", "-", (subject or "").lower()).strip("-")[:80].strip("-")
    return f"{stem or fallback or settings.download_filename}.html"


def generate_email(data: EmailData, design: DesignSettings | None = None) -> RenderedEmail:
    """
    Render an email and package it for presentation.

    Args:
        data:   Fully collected email content.
        design: Optional override; defaults to the configured design.

    Returns:
        RenderedEmail with subject, HTML body, plain-text body and file name.
    """
    html_body = render_email_html(data, design or design_from_settings())
    rendered = RenderedEmail(
        subject=data.subject,
        html_body=html_body,
        plain_body=html_to_plain_text(html_body),
        filename=download_filename(data.subject),
    )
    logger.info(
        "Rendered email %r (%d offers, %d footer CTAs, %d bytes).",
        data.subject, len(data.offers), len(data.footer_ctas), rendered.size_bytes,
    )
    return rendered
