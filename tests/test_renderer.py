"""
tests/test_renderer.py — Unit tests for the email renderer.

Covers the contrast helper, the dual VML/anchor button, the document
assembly rules and the offer/footer layouts. Pure functions only:
no network, no app settings involved.
"""

import pytest

from app.renderer.buttons import render_button
from app.renderer.colors import contrast_text_color
from app.renderer.design import DesignSettings, ResolvedDesign, legacy_font_name
from app.renderer.models import EmailData, FooterCta, ImagePosition, OfferData
from app.renderer.offers import FOOTER_GAP_ROW, render_offer, render_footer_ctas
from app.renderer.templates import render_email_html
from app.renderer.text import format_attr, format_text, html_to_plain_text

IMAGE = "data:image/png;base64,AAAA"


def make_email(**overrides) -> EmailData:
    fields = {"body_content": "Hello"}
    fields.update(overrides)
    return EmailData(**fields)


# ── contrast_text_color ───────────────────────────────────────────────────────

class TestContrastTextColor:
    def test_white_background_gets_dark_text(self):
        assert contrast_text_color("#ffffff") == "#333333"

    def test_black_background_gets_white_text(self):
        assert contrast_text_color("#000000") == "#ffffff"

    def test_mid_grey_just_above_threshold_is_dark(self):
        # brightness 127
        assert contrast_text_color("#7f7f7f") == "#333333"

    def test_exactly_threshold_is_white(self):
        # brightness 125 is not above 125
        assert contrast_text_color("#7d7d7d") == "#ffffff"

    def test_hash_is_optional(self):
        assert contrast_text_color("ffffff") == "#333333"
        assert contrast_text_color("000000") == "#ffffff"

    def test_default_indigo_gets_white_text(self):
        assert contrast_text_color("#4f46e5") == "#ffffff"

    def test_uppercase_hex(self):
        assert contrast_text_color("#FFFF00") == "#333333"

    def test_empty_returns_dark_default(self):
        assert contrast_text_color("") == "#333333"

    @pytest.mark.parametrize("color", ["#fff", "zzzzzz", "#12", "#", "rgb(0,0,0)", "#ggffaa"])
    def test_malformed_does_not_crash(self, color):
        assert contrast_text_color(color) in ("#333333", "#ffffff")


# ── legacy font ───────────────────────────────────────────────────────────────

class TestLegacyFontName:
    def test_first_family_of_stack(self):
        assert legacy_font_name("Arial, Helvetica, sans-serif") == "Arial"

    def test_quotes_are_stripped(self):
        assert legacy_font_name("'Open Sans', Arial") == "Open Sans"
        assert legacy_font_name('"Georgia", serif') == "Georgia"

    def test_single_family(self):
        assert legacy_font_name("Verdana") == "Verdana"


# ── format_text ───────────────────────────────────────────────────────────────

class TestFormatText:
    def test_newlines_become_breaks(self):
        assert format_text("a\nb\nc") == "a<br />b<br />c"

    def test_other_characters_untouched(self):
        assert format_text("Price: 5% off, today!") == "Price: 5% off, today!"

    def test_escapes_markup(self):
        assert format_text("<b>x</b> & y") == "&lt;b&gt;x&lt;/b&gt; &amp; y"

    def test_quotes_not_escaped_in_content(self):
        assert format_text("Don't say \"never\"") == "Don't say \"never\""

    def test_attr_escapes_quotes(self):
        assert format_attr("a\"b'c") == "a&quot;b&#x27;c"

    def test_no_escape_keeps_markup(self):
        assert format_text("<b>x</b>\ny", escape=False) == "<b>x</b><br />y"

    def test_empty(self):
        assert format_text("") == ""


# ── render_button ─────────────────────────────────────────────────────────────

class TestRenderButton:
    def test_renders_vml_and_anchor(self):
        html = render_button("Go", "https://example.com", "#ff0000")
        assert "<!--[if mso]>" in html
        assert "<v:roundrect" in html
        assert 'fillcolor="#ff0000"' in html
        assert 'strokecolor="#ff0000"' in html
        assert '<a href="https://example.com"' in html
        assert "mso-hide:all" in html

    def test_label_appears_once_per_rendering(self):
        html = render_button("Go", "https://example.com", "#ff0000")
        assert html.count(">Go</center>") == 1
        assert html.count(">Go</a>") == 1

    def test_dimensions(self):
        html = render_button("Go", "#", "#000000", width=150, height=40, arcsize=13)
        assert "height:40px;v-text-anchor:middle;width:150px;" in html
        assert 'arcsize="13%"' in html
        assert "line-height:40px" in html
        assert "width:150px;" in html

    def test_fluid_anchor_spans_cell(self):
        html = render_button("Go", "#", "#000000", width=520, fluid=True)
        assert "display:block" in html
        assert "width:100%;" in html
        # VML needs a pixel width
        assert "width:520px;" in html

    def test_link_is_escaped(self):
        html = render_button("Go", "https://x.com/?a=1&b=2", "#000000")
        assert 'href="https://x.com/?a=1&amp;b=2"' in html

    def test_legacy_font_inside_vml(self):
        html = render_button("Go", "#", "#000000", legacy_font="Georgia")
        assert "font-family:Georgia;" in html


# ── Document assembly ─────────────────────────────────────────────────────────

class TestRenderEmailHtml:
    def test_body_only_email(self):
        html = render_email_html(make_email())
        assert html.startswith("<!DOCTYPE html>")
        assert '<p style="margin: 0; color: #333333;">Hello</p>' in html
        assert "background-color: #ffffff; border-radius: 8px;" in html
        assert "<img" not in html
        assert "v:roundrect" not in html
        assert 'class="offer-card"' not in html
        assert 'class="footer-ctas"' not in html
        assert 'class="disclaimer"' not in html

    def test_document_shell(self):
        html = render_email_html(make_email(subject="Weekend Deals"))
        assert "<title>Weekend Deals</title>" in html
        assert 'xmlns:v="urn:schemas-microsoft-com:vml"' in html
        assert "@media screen and (max-width: 600px)" in html
        assert '<table align="center" role="presentation" cellspacing="0" cellpadding="0" border="0" width="600">' in html
        assert html.rstrip().endswith("</html>")

    def test_rendering_is_idempotent(self):
        data = make_email(
            cta_text="Shop", cta_link="https://shop.example.com",
            offers=[OfferData(title="Deal", image_data_url=IMAGE)],
            footer_ctas=[FooterCta(text="Visit", link="https://example.com")],
        )
        assert render_email_html(data) == render_email_html(data)

    def test_input_not_modified(self):
        data = make_email(offers=[OfferData(title="Deal")], disclaimer="Fine print")
        before = data.model_dump()
        render_email_html(data)
        assert data.model_dump() == before

    def test_dark_background_gets_white_text(self):
        html = render_email_html(make_email(body_background_color="#000000"))
        assert "background-color: #000000;" in html
        assert '<p style="margin: 0; color: #ffffff;">Hello</p>' in html

    def test_body_newlines_converted(self):
        html = render_email_html(make_email(body_content="Line one\nLine two"))
        assert "Line one<br />Line two" in html

    def test_hero_image_present_only_when_set(self):
        assert "Hero Image" not in render_email_html(make_email())
        html = render_email_html(make_email(hero_image=IMAGE))
        assert f'<img src="{IMAGE}" alt="Hero Image" width="600"' in html
        assert html.index("Hero Image") < html.index(">Hello</p>")

    def test_cta_needs_text_and_link(self):
        assert "v:roundrect" not in render_email_html(make_email(cta_text="Shop"))
        assert "v:roundrect" not in render_email_html(make_email(cta_link="https://x.com"))
        html = render_email_html(make_email(cta_text="Shop", cta_link="https://x.com"))
        assert 'class="primary-cta"' in html
        assert ">Shop</a>" in html

    def test_cta_default_color(self):
        html = render_email_html(make_email(cta_text="Shop", cta_link="https://x.com"))
        assert 'fillcolor="#4f46e5"' in html

    def test_cta_custom_color(self):
        html = render_email_html(
            make_email(cta_text="Shop", cta_link="https://x.com", cta_color="#ff6600")
        )
        assert 'fillcolor="#ff6600"' in html
        assert "#4f46e5" not in html

    def test_cta_follows_body(self):
        html = render_email_html(make_email(cta_text="Shop", cta_link="https://x.com"))
        assert html.index(">Hello</p>") < html.index('class="primary-cta"')

    def test_disclaimer_last_with_breaks(self):
        html = render_email_html(make_email(
            disclaimer="Terms apply.\nSee dealer.",
            footer_ctas=[FooterCta(text="Visit", link="https://example.com")],
        ))
        assert "Terms apply.<br />See dealer." in html
        assert html.index('class="footer-ctas"') < html.index('class="disclaimer"')

    def test_disclaimer_directly_follows_footer(self):
        html = render_email_html(make_email(
            disclaimer="Terms apply.",
            footer_ctas=[FooterCta(text="Visit", link="https://example.com")],
        ))
        assert "</table></td></tr><tr><td class=\"disclaimer\"" in html

    def test_apostrophes_and_quotes_kept_in_body(self):
        html = render_email_html(make_email(body_content="Don't miss\n\"it\""))
        assert "Don't miss<br />\"it\"" in html

    def test_default_font_and_legacy_font(self):
        html = render_email_html(make_email())
        assert "font-family: Arial, sans-serif !important;" in html

    def test_custom_font_family(self):
        html = render_email_html(make_email(font_family="Georgia, 'Times New Roman', serif"))
        assert "font-family: Georgia, sans-serif !important;" in html
        assert "font-family: Georgia, &#x27;Times New Roman&#x27;, serif;" in html

    def test_user_text_is_escaped(self):
        html = render_email_html(make_email(body_content="<script>alert(1)</script>"))
        assert "<script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html

    def test_escaping_can_be_disabled(self):
        html = render_email_html(
            make_email(body_content="<b>Bold</b>"),
            DesignSettings(escape_text=False),
        )
        assert "<b>Bold</b>" in html

    def test_design_settings_supply_defaults(self):
        design = DesignSettings(cta_color="#123456", body_background="#000000")
        html = render_email_html(
            make_email(cta_text="Shop", cta_link="https://x.com"), design
        )
        assert 'fillcolor="#123456"' in html
        assert "background-color: #000000;" in html
        assert '<p style="margin: 0; color: #ffffff;">Hello</p>' in html


# ── Offers ────────────────────────────────────────────────────────────────────

class TestOffers:
    @pytest.fixture
    def style(self):
        return ResolvedDesign.resolve(make_email(), DesignSettings())

    def test_empty_offer_renders_nothing(self, style):
        offer = OfferData(cta_text="Go", cta_link="https://x.com", image_data_url=IMAGE)
        assert render_offer(offer, style) == ""

    def test_offer_block_absent_when_all_offers_empty(self):
        html = render_email_html(make_email(offers=[OfferData(), OfferData(disclaimer="x")]))
        assert 'class="offer-card"' not in html

    @pytest.mark.parametrize("field", ["vehicle", "title", "details"])
    def test_any_text_field_renders_card(self, style, field):
        assert 'class="offer-card"' in render_offer(OfferData(**{field: "x"}), style)

    def test_card_followed_by_spacer(self, style):
        html = render_offer(OfferData(title="Deal"), style)
        assert html.endswith('<tr><td style="font-size: 20px; line-height: 20px;">&nbsp;</td></tr>')

    def test_offers_keep_input_order(self):
        html = render_email_html(make_email(offers=[
            OfferData(title="Alpha"), OfferData(title="Bravo"), OfferData(title="Charlie"),
        ]))
        positions = [html.index(f">{t}</h2>") for t in ("Alpha", "Bravo", "Charlie")]
        assert positions == sorted(positions)
        assert html.count('class="offer-card"') == 3

    def test_offers_after_primary_cta(self):
        html = render_email_html(make_email(
            cta_text="Shop", cta_link="https://x.com", offers=[OfferData(title="Deal")],
        ))
        assert html.index('class="primary-cta"') < html.index('class="offer-card"')

    def test_details_and_disclaimer_newlines(self, style):
        html = render_offer(
            OfferData(title="Deal", details="a\nb", disclaimer="c\nd"), style
        )
        assert "a<br />b" in html
        assert "c<br />d" in html

    def test_offer_without_image_is_single_text_cell(self, style):
        html = render_offer(OfferData(title="Deal"), style)
        assert "<img" not in html

    def test_top_image_precedes_text_at_full_width(self, style):
        offer = OfferData(title="Roadster", image_data_url=IMAGE, image_position=ImagePosition.TOP)
        html = render_offer(offer, style)
        assert f'<img src="{IMAGE}" alt="Roadster" width="100%"' in html
        assert html.index(IMAGE) < html.index(">Roadster</h2>")
        assert 'width="240"' not in html

    def test_left_image_column_first(self, style):
        offer = OfferData(title="Roadster", image_data_url=IMAGE)
        html = render_offer(offer, style)
        assert 'width="240"' in html
        assert html.index(IMAGE) < html.index(">Roadster</h2>")

    def test_right_image_column_last(self, style):
        offer = OfferData(title="Roadster", image_data_url=IMAGE, image_position=ImagePosition.RIGHT)
        html = render_offer(offer, style)
        assert 'width="240"' in html
        assert html.index(">Roadster</h2>") < html.index(IMAGE)

    def test_offer_button_uses_own_color(self, style):
        html = render_offer(
            OfferData(title="Deal", cta_text="See", cta_link="https://x.com", cta_color="#00aa00"),
            style,
        )
        assert 'fillcolor="#00aa00"' in html
        assert "height:40px;v-text-anchor:middle;width:150px;" in html

    def test_offer_button_falls_back_to_shared_color(self, style):
        html = render_offer(OfferData(title="Deal", cta_text="See", cta_link="https://x.com"), style)
        assert 'fillcolor="#4f46e5"' in html

    def test_offer_button_needs_text_and_link(self, style):
        assert "v:roundrect" not in render_offer(OfferData(title="Deal", cta_text="See"), style)


# ── Footer CTAs ───────────────────────────────────────────────────────────────

class TestFooterCtas:
    @pytest.fixture
    def style(self):
        return ResolvedDesign.resolve(make_email(), DesignSettings())

    def _ctas(self, count):
        return [FooterCta(text=f"Button {i}", link=f"https://x.com/{i}") for i in range(count)]

    def test_no_ctas_no_panel(self, style):
        assert render_footer_ctas([], style) == ""
        assert 'class="footer-ctas"' not in render_email_html(make_email())

    @pytest.mark.parametrize("count,gaps", [(1, 0), (2, 1), (3, 2)])
    def test_gap_only_between_buttons(self, style, count, gaps):
        html = render_footer_ctas(self._ctas(count), style)
        assert html.count(FOOTER_GAP_ROW) == gaps
        assert html.count('class="footer-ctas"') == 1

    def test_order_preserved(self, style):
        html = render_footer_ctas(self._ctas(3), style)
        positions = [html.index(f">Button {i}</a>") for i in range(3)]
        assert positions == sorted(positions)

    def test_default_footer_colors(self, style):
        html = render_footer_ctas(self._ctas(1), style)
        assert 'fillcolor="#1f2937"' in html
        assert "color:#ffffff;" in html
        assert "width:100%;" in html

    def test_custom_footer_colors(self):
        html = render_email_html(make_email(
            footer_ctas=self._ctas(1),
            footer_background_color="#abcdef",
            footer_cta_text_color="#010101",
        ))
        assert 'fillcolor="#abcdef"' in html
        assert "color:#010101;" in html


# ── Plain text ────────────────────────────────────────────────────────────────

class TestHtmlToPlainText:
    def test_extracts_visible_text_once(self):
        html = render_email_html(make_email(
            subject="Subject line",
            body_content="Hello\nWorld",
            cta_text="Shop",
            cta_link="https://x.com",
        ))
        text = html_to_plain_text(html)
        lines = text.splitlines()
        assert "Hello" in lines
        assert "World" in lines
        assert text.count("Shop") == 1
        assert "Subject line" not in text
        assert "mso" not in text

    def test_empty_document(self):
        assert html_to_plain_text("") == ""
