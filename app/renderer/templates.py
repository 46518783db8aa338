"""
app/renderer/templates.py — Email document rendering.

render_email_html() maps an EmailData record to a complete, self-contained
HTML document that survives legacy email clients:
  - inline CSS only (plus a small head block for resets and mobile overrides)
  - an Outlook-only fixed-width wrapper table in conditional comments
  - VML buttons for Outlook, styled anchors for everyone else

The function is pure: same input, same output, no I/O.
"""

from app.renderer.buttons import render_button
from app.renderer.design import DesignSettings, ResolvedDesign
from app.renderer.models import EmailData
from app.renderer.offers import SPACER_ROW, render_footer_ctas, render_offers
from app.renderer.text import format_attr, format_text

PAGE_BACKGROUND = "#f1f3f5"


# ── Rows ──────────────────────────────────────────────────────────────────────

def _hero_row(data: EmailData, style: ResolvedDesign) -> str:
    if not data.hero_image:
        return ""
    return (
        "<tr><td>"
        f'<img src="{format_attr(data.hero_image, style.escape)}" alt="Hero Image" width="600" '
        'style="width: 100%; max-width: 600px; height: auto; margin: auto; display: block; '
        'border-radius: 8px;">'
        "</td></tr>"
        f"{SPACER_ROW}"
    )


def _body_row(data: EmailData, style: ResolvedDesign) -> str:
    return (
        "<tr>"
        f'<td class="email-body" style="padding: 10px 20px; background-color: '
        f'{format_attr(style.body_background, style.escape)}; border-radius: 8px;">'
        f'<p style="margin: 0; color: {style.body_text_color};">'
        f"{format_text(data.body_content, style.escape)}</p>"
        "</td>"
        "</tr>"
        f"{SPACER_ROW}"
    )


def _cta_row(data: EmailData, style: ResolvedDesign) -> str:
    if not (data.cta_text and data.cta_link):
        return ""
    button = render_button(
        data.cta_text,
        data.cta_link,
        background=style.cta_color,
        width=200,
        height=50,
        font_size=16,
        arcsize=10,
        font_family=style.font_family,
        legacy_font=style.legacy_font,
        escape=style.escape,
    )
    return (
        '<tr><td class="primary-cta" align="center">'
        '<table role="presentation" border="0" cellpadding="0" cellspacing="0">'
        f"<tr><td>{button}</td></tr>"
        "</table>"
        "</td></tr>"
        f"{SPACER_ROW}"
    )


def _disclaimer_row(data: EmailData, style: ResolvedDesign) -> str:
    if not data.disclaimer:
        return ""
    return (
        '<tr><td class="disclaimer" style="text-align: center; padding: 20px; font-size: 12px; '
        'line-height: 1.5; color: #718096;">'
        f"{format_text(data.disclaimer, style.escape)}"
        "</td></tr>"
    )


# ── Document ──────────────────────────────────────────────────────────────────

def render_email_html(data: EmailData, design: DesignSettings | None = None) -> str:
    """
    Render the full HTML document for an email.

    Args:
        data:   The email content. Never modified.
        design: Fallback colors/fonts and the escaping switch.
                Defaults to DesignSettings().

    Returns:
        A complete HTML document as a string.
    """
    style = ResolvedDesign.resolve(data, design or DesignSettings())
    esc = style.escape

    rows = "".join([
        _hero_row(data, style),
        _body_row(data, style),
        _cta_row(data, style),
        render_offers(data.offers, style),
        render_footer_ctas(data.footer_ctas, style),
        _disclaimer_row(data, style),
    ])

    return f"""<!DOCTYPE html>
<html lang="en" xmlns="http://www.w3.org/1999/xhtml" xmlns:v="urn:schemas-microsoft-com:vml" xmlns:o="urn:schemas-microsoft-com:office:office">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width">
    <meta http-equiv="X-UA-Compatible" content="IE=edge">
    <meta name="x-apple-disable-message-reformatting">
    <title>{format_attr(data.subject, esc)}</title>
    <!--[if mso]>
        <style>
            * {{
                font-family: {format_attr(style.legacy_font, esc)}, sans-serif !important;
            }}
        </style>
    <![endif]-->
    <style>
        html, body {{
            margin: 0 auto !important;
            padding: 0 !important;
            height: 100% !important;
            width: 100% !important;
            background: {PAGE_BACKGROUND};
        }}
        * {{ -ms-text-size-adjust: 100%; -webkit-text-size-adjust: 100%; }}
        table, td {{ mso-table-lspace: 0pt !important; mso-table-rspace: 0pt !important; }}
        table {{ border-spacing: 0 !important; border-collapse: collapse !important; table-layout: fixed !important; margin: 0 auto !important; }}
        img {{ -ms-interpolation-mode: bicubic; }}
        a {{ text-decoration: none; }}
        @media screen and (max-width: 600px) {{
            .email-container {{
                width: 100% !important;
                margin: auto !important;
            }}
            .stack-column {{
                display: block !important;
                width: 100% !important;
                max-width: 100% !important;
                padding-right: 0 !important;
                padding-bottom: 15px !important;
            }}
        }}
    </style>
</head>
<body width="100%" style="margin: 0; padding: 0 !important; mso-line-height-rule: exactly; background-color: {PAGE_BACKGROUND};">
    <center style="width: 100%; background-color: {PAGE_BACKGROUND};">
        <div style="max-width: 600px; margin: 0 auto;" class="email-container">
            <!--[if mso]>
            <table align="center" role="presentation" cellspacing="0" cellpadding="0" border="0" width="600">
            <tr>
            <td>
            <![endif]-->
            <table align="center" role="presentation" cellspacing="0" cellpadding="0" border="0" width="100%" style="margin: auto;">
                <tr>
                    <td style="padding: 20px; font-family: {format_attr(style.font_family, esc)}; font-size: 15px; line-height: 1.5; color: #333333;">
                        <table role="presentation" cellspacing="0" cellpadding="0" border="0" width="100%">
                            {rows}
                        </table>
                    </td>
                </tr>
            </table>
            <!--[if mso]>
            </td>
            </tr>
            </table>
            <![endif]-->
        </div>
    </center>
</body>
</html>"""
