"""
app/renderer/models.py — Input records for the email renderer.

EmailData is the single structured input of a render call. The form collector
(or an API client) builds it; the renderer only reads it.
"""

import enum

from pydantic import BaseModel, ConfigDict, Field

MAX_OFFERS = 5
MAX_FOOTER_CTAS = 3


class ImagePosition(str, enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"


class OfferData(BaseModel):
    """One promotional offer card. Every field is optional."""

    model_config = ConfigDict(frozen=True)

    vehicle: str = ""
    title: str = ""
    details: str = ""
    image_position: ImagePosition = ImagePosition.LEFT
    cta_text: str = ""
    cta_link: str = ""
    cta_color: str = ""
    disclaimer: str = ""
    image_data_url: str = ""

    @property
    def has_content(self) -> bool:
        """An offer with no vehicle, title or details renders nothing."""
        return bool(self.vehicle or self.title or self.details)


class FooterCta(BaseModel):
    """A full-width footer button. Both fields are required."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1)
    link: str = Field(..., min_length=1)


class EmailData(BaseModel):
    """Everything needed to render one email document."""

    model_config = ConfigDict(frozen=True)

    subject: str = ""
    body_content: str = Field(..., description="Main body text; newlines become line breaks")
    body_background_color: str = ""
    hero_image: str = Field(default="", description="Banner image as a data URL")
    cta_text: str = ""
    cta_link: str = ""
    cta_color: str = ""
    disclaimer: str = ""
    font_family: str = ""
    offers: list[OfferData] = Field(default_factory=list, max_length=MAX_OFFERS)
    footer_ctas: list[FooterCta] = Field(default_factory=list, max_length=MAX_FOOTER_CTAS)
    footer_background_color: str = ""
    footer_cta_text_color: str = ""
