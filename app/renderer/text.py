"""
app/renderer/text.py — Text helpers shared by the renderer blocks.

Provides:
  - format_text()        : escape (optional) + newline to <br /> for element content
  - format_attr()        : escape (optional) for attribute values
  - html_to_plain_text() : readable plain-text version of a rendered email
"""

import html
import re

from bs4 import BeautifulSoup, Comment

LINE_BREAK = "<br />"


def format_attr(value: str, escape: bool = True) -> str:
    """Prepare a user value for an HTML attribute position."""
    if not value:
        return ""
    return html.escape(value, quote=True) if escape else value


def format_text(value: str, escape: bool = True) -> str:
    """
    Prepare user text for element content.

    Escaping runs first so the inserted <br /> tags survive; nothing else
    in the text is altered.
    """
    if not value:
        return ""
    text = html.escape(value, quote=False) if escape else value
    return text.replace("\n", LINE_BREAK)


def html_to_plain_text(document: str) -> str:
    """
    Extract the readable text of a rendered email.

    Outlook-only conditional comments and the <head> are dropped, <br> tags
    become newlines, and blank lines are collapsed.
    """
    if not document:
        return ""

    soup = BeautifulSoup(document, "lxml")
    for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
        comment.extract()
    if soup.head:
        soup.head.decompose()
    for tag in soup(["style", "script"]):
        tag.decompose()
    for br in soup.find_all("br"):
        br.replace_with("\n")

    text = soup.get_text(separator="\n")
    lines = [re.sub(r"[ \t\xa0]+", " ", line).strip() for line in text.splitlines()]
    return "\n".join(line for line in lines if line)
