"""
api/schemas.py — Pydantic request/response models for all API endpoints.

Requests reuse the renderer's EmailData record directly; responses are
separate so the API controls exactly what it returns.
"""

from pydantic import BaseModel, Field

from app.renderer.models import EmailData
from app.services.email_service import RenderedEmail

__all__ = ["EmailData", "RenderResult", "ErrorOut"]


class RenderResult(BaseModel):
    """Rendered email for a code view / clipboard copy."""
    subject: str
    html: str = Field(..., description="Complete HTML document")
    plain_text: str = Field(..., description="Readable text extracted from the HTML")
    filename: str = Field(..., description="Suggested download name, ends in .html")
    size_bytes: int

    @classmethod
    def from_rendered(cls, rendered: RenderedEmail) -> "RenderResult":
        return cls(
            subject=rendered.subject,
            html=rendered.html_body,
            plain_text=rendered.plain_body,
            filename=rendered.filename,
            size_bytes=rendered.size_bytes,
        )


class ErrorOut(BaseModel):
    detail: str
