"""
app/renderer/design.py — Design defaults threaded into every render call.

The renderer never reads global state: whatever the caller wants to tweak
(fallback colors, the font stack, escaping) travels in a DesignSettings value.
"""

from dataclasses import dataclass

from app.renderer.colors import contrast_text_color
from app.renderer.models import EmailData

DEFAULT_CTA_COLOR = "#4f46e5"
DEFAULT_BODY_BACKGROUND = "#ffffff"
DEFAULT_FONT_FAMILY = "Arial, 'Helvetica Neue', Helvetica, sans-serif"
DEFAULT_FOOTER_BACKGROUND = "#1f2937"
DEFAULT_FOOTER_TEXT_COLOR = "#ffffff"


@dataclass(frozen=True)
class DesignSettings:
    """Fallbacks used when the matching EmailData field is empty."""
    cta_color: str = DEFAULT_CTA_COLOR
    body_background: str = DEFAULT_BODY_BACKGROUND
    font_family: str = DEFAULT_FONT_FAMILY
    footer_background: str = DEFAULT_FOOTER_BACKGROUND
    footer_text_color: str = DEFAULT_FOOTER_TEXT_COLOR
    escape_text: bool = True


def legacy_font_name(font_stack: str) -> str:
    """First family of a CSS font stack with its quotes stripped, for Outlook."""
    return font_stack.split(",")[0].strip().strip("'\"")


@dataclass(frozen=True)
class ResolvedDesign:
    """Concrete colors and fonts for one render, after defaults are applied."""
    font_family: str
    legacy_font: str
    cta_color: str
    body_background: str
    body_text_color: str
    footer_background: str
    footer_text_color: str
    escape: bool

    @classmethod
    def resolve(cls, data: EmailData, design: DesignSettings) -> "ResolvedDesign":
        font_family = data.font_family or design.font_family
        body_background = data.body_background_color or design.body_background
        return cls(
            font_family=font_family,
            legacy_font=legacy_font_name(font_family),
            cta_color=data.cta_color or design.cta_color,
            body_background=body_background,
            body_text_color=contrast_text_color(body_background),
            footer_background=data.footer_background_color or design.footer_background,
            footer_text_color=data.footer_cta_text_color or design.footer_text_color,
            escape=design.escape_text,
        )
