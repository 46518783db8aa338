"""
app/collector/images.py — Turns images into inline data URLs.

Emails built here never reference hosted images: uploads, local files and
remote URLs are all inlined as base64 data URLs before rendering.

Provides:
  - bytes_to_data_url()       : raw bytes + content type -> data URL
  - read_upload_as_data_url() : FastAPI UploadFile -> data URL (async)
  - load_image_file()         : local path -> data URL
  - fetch_image_as_data_url() : http(s) URL -> data URL, with retries
"""

import base64
import logging
import mimetypes
from pathlib import Path

import requests
from starlette.datastructures import UploadFile
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from app.config import settings

logger = logging.getLogger(__name__)

# Some image hosts refuse requests without a browser-like User-Agent
HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; HtmlEmailBuilder/1.0)"
}


class ImageReadError(Exception):
    """An image could not be read, fetched or accepted for inlining."""


def _resolve_content_type(content_type: str | None, filename: str | None) -> str:
    if content_type:
        return content_type.split(";")[0].strip().lower()
    guessed, _ = mimetypes.guess_type(filename or "")
    return guessed or "application/octet-stream"


def bytes_to_data_url(content: bytes, content_type: str, source: str = "image") -> str:
    """
    Encode image bytes as a data URL.

    Raises:
        ImageReadError: if the content is empty, not an image, or larger
                        than settings.max_image_bytes.
    """
    if not content:
        raise ImageReadError(f"{source} is empty")
    if not content_type.startswith("image/"):
        raise ImageReadError(f"{source} is not an image (content type {content_type!r})")
    if len(content) > settings.max_image_bytes:
        raise ImageReadError(
            f"{source} is {len(content)} bytes, limit is {settings.max_image_bytes}"
        )
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{content_type};base64,{encoded}"


async def read_upload_as_data_url(upload: UploadFile) -> str:
    """
    Read an uploaded file into a data URL.

    Returns an empty string for an empty file input (nothing selected).
    """
    try:
        content = await upload.read()
    except Exception as exc:
        raise ImageReadError(f"Failed to read uploaded file {upload.filename!r}: {exc}") from exc

    if not content:
        return ""
    content_type = _resolve_content_type(upload.content_type, upload.filename)
    return bytes_to_data_url(content, content_type, source=upload.filename or "upload")


def load_image_file(path: str | Path) -> str:
    """Read a local image file into a data URL."""
    path = Path(path)
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise ImageReadError(f"Cannot read image file {path}: {exc}") from exc
    return bytes_to_data_url(content, _resolve_content_type(None, path.name), source=str(path))


@retry(
    retry=retry_if_exception_type(requests.RequestException),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    reraise=True,
)
def _download(url: str) -> requests.Response:
    """
    Internal: GET the image.
    Retries up to 3 times on transient network errors.
    """
    response = requests.get(url, headers=HEADERS, timeout=settings.image_fetch_timeout)
    response.raise_for_status()
    return response


def fetch_image_as_data_url(url: str) -> str:
    """
    Download a remote image and inline it as a data URL.

    Raises:
        ImageReadError: if the download fails after retries or the response
                        is not an acceptable image.
    """
    logger.info("Fetching image %s ...", url)
    try:
        response = _download(url)
    except requests.RequestException as exc:
        logger.error("Failed to fetch image %s after retries: %s", url, exc)
        raise ImageReadError(f"Could not fetch image {url}: {exc}") from exc

    content_type = _resolve_content_type(response.headers.get("Content-Type"), url)
    return bytes_to_data_url(response.content, content_type, source=url)


def resolve_image_reference(reference: str) -> str:
    """
    Inline an image given as a data URL, an http(s) URL or a local path.

    Data URLs and empty strings are returned unchanged.
    """
    if not reference or reference.startswith("data:"):
        return reference
    if reference.startswith(("http://", "https://")):
        return fetch_image_as_data_url(reference)
    return load_image_file(reference)
