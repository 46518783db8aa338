"""
api/endpoints/email_routes.py — Routes for rendering emails.

POST /emails/render    — JSON EmailData -> rendered HTML + plain text (code view)
POST /emails/preview   — JSON EmailData -> text/html document (preview frame)
POST /emails/download  — JSON EmailData -> text/html attachment
POST /emails/form      — Multipart builder form (fields + image uploads) -> rendered HTML
"""

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from app.collector.form import collect_email_data, image_field_names
from app.collector.images import (
    ImageReadError,
    fetch_image_as_data_url,
    read_upload_as_data_url,
)
from app.services.email_service import generate_email
from api.schemas import EmailData, ErrorOut, RenderResult

logger = logging.getLogger(__name__)
router = APIRouter()

GENERATION_FAILED = "Email generation failed. Check the server log for details."


@router.post("/render", response_model=RenderResult, summary="Render an email to HTML")
def render_email(payload: EmailData):
    """Render the email and return the HTML source with a plain-text version."""
    return RenderResult.from_rendered(generate_email(payload))


@router.post("/preview", response_class=HTMLResponse, summary="Preview an email")
def preview_email(payload: EmailData):
    """Return the bare HTML document, suitable for a sandboxed iframe."""
    return HTMLResponse(content=generate_email(payload).html_body)


@router.post("/download", summary="Download an email as an .html file")
def download_email(payload: EmailData):
    """Return the HTML document as a file attachment."""
    rendered = generate_email(payload)
    return Response(
        content=rendered.html_body,
        media_type="text/html",
        headers={"Content-Disposition": f'attachment; filename="{rendered.filename}"'},
    )


async def _collect_images(form) -> dict[str, str]:
    """
    Convert every image input of the form to a data URL.

    An uploaded file wins over the matching '<field>_url' text input.
    """
    images = {}
    for name in image_field_names():
        value = form.get(name)
        data_url = ""
        if isinstance(value, UploadFile):
            data_url = await read_upload_as_data_url(value)
        url = form.get(f"{name}_url")
        if not data_url and isinstance(url, str) and url.strip():
            data_url = await run_in_threadpool(fetch_image_as_data_url, url.strip())
        if data_url:
            images[name] = data_url
    return images


@router.post(
    "/form",
    response_model=RenderResult,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
    summary="Render an email from the builder form",
)
async def render_form(request: Request):
    """
    Accept the builder form as multipart/form-data, inline its images and
    render the email. Image failures are reported without rendering.
    """
    form = await request.form()
    fields = {key: value for key, value in form.items() if isinstance(value, str)}
    if not fields.get("body", "").strip():
        raise HTTPException(status_code=400, detail="The email body is required.")

    try:
        images = await _collect_images(form)
    except ImageReadError as exc:
        logger.error("Image read failed: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))

    try:
        # Rendering and plain-text parsing are CPU-bound; keep them off the loop
        rendered = await run_in_threadpool(generate_email, collect_email_data(fields, images))
    except Exception as exc:
        logger.exception("Email generation failed: %s", exc)
        raise HTTPException(status_code=500, detail=GENERATION_FAILED)
    return RenderResult.from_rendered(rendered)
