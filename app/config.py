"""
app/config.py — Central configuration loaded from environment variables.
All modules import settings from here; never read os.environ directly elsewhere.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

from app.renderer.design import (
    DEFAULT_BODY_BACKGROUND,
    DEFAULT_CTA_COLOR,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FOOTER_BACKGROUND,
    DEFAULT_FOOTER_TEXT_COLOR,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Service ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", description="Root logging level")
    cors_allow_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the API from a browser form",
    )

    # ── Design defaults ───────────────────────────────────────────────────────
    default_cta_color: str = Field(
        default=DEFAULT_CTA_COLOR,
        description="Button color used when an email or offer leaves it empty",
    )
    default_body_background: str = Field(default=DEFAULT_BODY_BACKGROUND)
    default_font_family: str = Field(default=DEFAULT_FONT_FAMILY)
    default_footer_background: str = Field(default=DEFAULT_FOOTER_BACKGROUND)
    default_footer_text_color: str = Field(default=DEFAULT_FOOTER_TEXT_COLOR)
    escape_user_text: bool = Field(
        default=True,
        description="HTML-escape user text before it is placed in the document",
    )

    # ── Images ────────────────────────────────────────────────────────────────
    max_image_bytes: int = Field(
        default=5 * 1024 * 1024,
        gt=0,
        description="Largest image (upload, file or URL) that will be inlined",
    )
    image_fetch_timeout: float = Field(
        default=15.0,
        gt=0,
        description="Seconds to wait for a remote image",
    )

    # ── Output ────────────────────────────────────────────────────────────────
    download_filename: str = Field(
        default="email-template",
        description="File name stem used when the email has no subject",
    )


# Singleton — import this everywhere
settings = Settings()
