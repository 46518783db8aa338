"""
scripts/render_email.py — CLI to render an email description into an .html file.

Steps:
  1. Load the email description (EmailData as JSON)
  2. Inline images given as local paths or http(s) URLs
  3. Render the HTML document
  4. Write it to a file (name derived from the subject) or stdout

Usage:
    python scripts/render_email.py email.json [-o out.html] [--stdout] [--no-escape]
"""

import argparse
import json
import logging
import sys
import os
from dataclasses import replace
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ── Imports ───────────────────────────────────────────────────────────────────

from pydantic import ValidationError

from app.collector.images import ImageReadError, resolve_image_reference
from app.renderer.models import EmailData
from app.services.email_service import RenderedEmail, design_from_settings, generate_email


# ── Helpers ───────────────────────────────────────────────────────────────────

def inline_images(raw: dict) -> dict:
    """
    Replace image references (paths / URLs) in a raw email dict with data URLs.
    The input dict is left untouched.
    """
    resolved = dict(raw)
    resolved["hero_image"] = resolve_image_reference(raw.get("hero_image") or "")
    resolved["offers"] = [
        {**offer, "image_data_url": resolve_image_reference(offer.get("image_data_url") or "")}
        for offer in raw.get("offers") or []
    ]
    return resolved


def load_email_data(path: Path) -> EmailData:
    """Read and validate the JSON description, inlining its images."""
    raw = json.loads(path.read_text(encoding="utf-8"))
    return EmailData.model_validate(inline_images(raw))


# ── Main pipeline ─────────────────────────────────────────────────────────────

def render_file(input_path: Path, escape: bool = True) -> RenderedEmail:
    """Render the email described by input_path."""
    data = load_email_data(input_path)
    design = replace(design_from_settings(), escape_text=escape)
    return generate_email(data, design)


# ── Entry point ───────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="HTML Email Builder — render an email")
    parser.add_argument("input", type=Path, help="Email description as JSON")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output .html path (default: derived from the subject)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the HTML instead of writing a file (pipe it to your clipboard)",
    )
    parser.add_argument(
        "--no-escape",
        action="store_true",
        help="Insert user text verbatim instead of HTML-escaping it",
    )
    args = parser.parse_args(argv)

    try:
        rendered = render_file(args.input, escape=not args.no_escape)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Cannot read %s: %s", args.input, exc)
        return 1
    except ValidationError as exc:
        logger.error("Invalid email description in %s:\n%s", args.input, exc)
        return 1
    except ImageReadError as exc:
        logger.error("Image failed: %s", exc)
        return 1

    if args.stdout:
        sys.stdout.write(rendered.html_body)
        return 0

    output = args.output or Path(rendered.filename)
    output.write_text(rendered.html_body, encoding="utf-8")
    logger.info("Wrote %s (%d bytes).", output, rendered.size_bytes)
    return 0


if __name__ == "__main__":
    sys.exit(main())
