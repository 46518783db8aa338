"""
app/renderer/colors.py — Text color selection for colored backgrounds.

Uses the W3C AERT brightness formula:
    brightness = (R*299 + G*587 + B*114) / 1000
Backgrounds brighter than 125 get dark text, everything else gets white.
"""

import string

DARK_TEXT = "#333333"
LIGHT_TEXT = "#ffffff"
BRIGHTNESS_THRESHOLD = 125


def _parse_hex_pair(pair: str) -> int | None:
    """
    Parse the leading hex digits of a two-character slice.

    "7f" -> 127, "7z" -> 7, "zz" -> None. Mirrors a lenient integer parse so
    malformed colors never raise.
    """
    digits = ""
    for char in pair:
        if char not in string.hexdigits:
            break
        digits += char
    return int(digits, 16) if digits else None


def contrast_text_color(background: str) -> str:
    """
    Return a readable text color for the given background hex color.

    Args:
        background: 6-digit hex color, with or without a leading '#'.
                    Empty means "no background chosen".

    Returns:
        '#333333' for light backgrounds (and for empty input),
        '#ffffff' for dark ones.
    """
    if not background:
        return DARK_TEXT

    hex_value = background.replace("#", "", 1)
    channels = [_parse_hex_pair(hex_value[i:i + 2]) for i in (0, 2, 4)]
    if any(channel is None for channel in channels):
        # Brightness is undefined, so it is not above the threshold
        return LIGHT_TEXT

    r, g, b = channels
    brightness = (r * 299 + g * 587 + b * 114) / 1000
    return DARK_TEXT if brightness > BRIGHTNESS_THRESHOLD else LIGHT_TEXT
