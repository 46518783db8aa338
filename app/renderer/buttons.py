"""
app/renderer/buttons.py — Bulletproof call-to-action buttons.

Outlook's Word engine ignores border-radius and background on anchors, so each
button is emitted twice: a VML rounded rectangle inside an MSO-only
conditional comment, then a regular styled anchor carrying mso-hide:all.
Every client therefore shows exactly one button.
"""

from app.renderer.text import format_attr


def render_button(
    text: str,
    link: str,
    background: str,
    text_color: str = "#ffffff",
    width: int = 200,
    height: int = 50,
    font_size: int = 16,
    arcsize: int = 10,
    font_family: str = "sans-serif",
    legacy_font: str = "sans-serif",
    fluid: bool = False,
    escape: bool = True,
) -> str:
    """
    Render one dual VML/anchor button.

    Args:
        text:        Button label.
        link:        Target URL.
        background:  Fill color (also the VML stroke color).
        text_color:  Label color.
        width:       Pixel width of the VML shape, and of the anchor unless fluid.
        height:      Pixel height; the anchor uses it as line-height.
        font_size:   Label size in px.
        arcsize:     VML corner rounding, in percent.
        font_family: CSS font stack for the anchor.
        legacy_font: Single font name used inside the VML shape.
        fluid:       Stretch the anchor to 100% of its cell.
        escape:      HTML-escape the user-supplied values.
    """
    label = format_attr(text, escape)
    href = format_attr(link, escape)
    fill = format_attr(background, escape)
    color = format_attr(text_color, escape)
    anchor_width = "100%" if fluid else f"{width}px"
    display = "block" if fluid else "inline-block"

    return (
        f'<div><!--[if mso]>\n'
        f'  <v:roundrect xmlns:v="urn:schemas-microsoft-com:vml" '
        f'xmlns:w="urn:schemas-microsoft-com:office:word" href="{href}" '
        f'style="height:{height}px;v-text-anchor:middle;width:{width}px;" '
        f'arcsize="{arcsize}%" strokecolor="{fill}" fillcolor="{fill}">\n'
        f'    <w:anchorlock/>\n'
        f'    <center style="color:{color};font-family:{format_attr(legacy_font, escape)};'
        f'font-size:{font_size}px;font-weight:bold;">{label}</center>\n'
        f'  </v:roundrect>\n'
        f'<![endif]--><a href="{href}" '
        f'style="background-color:{fill};border:none;border-radius:5px;color:{color};'
        f'display:{display};font-family:{format_attr(font_family, escape)};'
        f'font-size:{font_size}px;font-weight:bold;line-height:{height}px;'
        f'text-align:center;text-decoration:none;width:{anchor_width};'
        f'-webkit-text-size-adjust:none;mso-hide:all;">{label}</a></div>'
    )
