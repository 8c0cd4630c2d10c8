import pytest
from django.utils.safestring import mark_safe

from shop.elements import (
    ajax_user_search,
    checkbox,
    date_field,
    required_indicator,
    text,
    textarea,
)
from shop.elements import inputs
from shop.elements.config import TextConfig
from shop.services import hooks


def test_text_field_markup():
    html = text(name="shop_email", id="shop-email", label="Email", required=True)
    assert html.startswith('<span id="shop-email-wrap">')
    assert html.endswith("</span>")
    assert (
        '<label class="shop-label" for="shop-email">Email'
        '<span class="shop-required-indicator">*</span></label>'
    ) in html
    assert 'class="regular-text shop-input shop-email required"' in html
    assert 'name="shop_email"' in html
    assert 'type="text"' in html
    assert " required" in html


def test_text_field_omits_empty_attributes():
    html = text(name="first")
    assert "placeholder" not in html
    assert "autocomplete" not in html
    assert "disabled" not in html
    assert "value=" not in html
    assert 'id="first"' in html.split("<input", 1)[1]
    assert "<label" not in html


def test_text_field_keeps_zero_value():
    assert 'value="0"' in text(name="qty", value=0)


def test_text_field_description_is_linked():
    html = text(name="shop_zip", id="card_zip", desc="Postal code")
    assert '<span class="shop-description" id="card_zip-description">Postal code</span>' in html
    assert 'aria-describedby="card_zip-description"' in html
    assert "card-zip" in html


def test_text_field_id_defaults_to_name():
    html = text(name="shop_email", label="Email", desc="Where receipts go")
    assert '<label class="shop-label" for="shop_email">Email</label>' in html
    assert '<span class="shop-description" id="shop_email-description">' in html
    assert 'aria-describedby="shop_email-description"' in html
    assert 'id="-description"' not in html


def test_text_field_data_attributes_and_wrapper_tag():
    html = text(name="city", data={"Lookup Type": "city", "min": 3}, wrapper_tag="p")
    assert html.startswith('<p id="shop-city-wrap">')
    assert html.endswith("</p>")
    assert 'data-lookuptype="city"' in html
    assert 'data-min="3"' in html


def test_text_field_escapes_values():
    html = text(name="q", value='"><script>', label="<b>Label</b>")
    assert "<script>" not in html
    assert "&lt;b&gt;Label&lt;/b&gt;" in html
    assert 'value="&quot;&gt;&lt;script&gt;"' in html


def test_text_args_hook():
    hooks.add_filter("text_args", lambda config: config.replace(label="Changed"))
    assert ">Changed</label>" in text(name="first", id="first", label="Original")


def test_text_atts_hook_receives_config():
    seen = []

    def add_attribute(atts, config):
        seen.append(config.name)
        atts = dict(atts)
        atts["data-extra"] = "yes"
        atts["placeholder"] = ""
        return atts

    hooks.add_filter("text_atts", add_attribute)
    html = text(name="first", placeholder="Your name")
    assert seen == ["first"]
    assert 'data-extra="yes"' in html
    assert "placeholder" not in html


def test_text_accepts_config_record():
    config = TextConfig(name="last", id="last", type="email")
    assert 'type="email"' in text(config)


def test_text_rejects_unknown_options():
    with pytest.raises(TypeError):
        text(name="first", colour="red")


def test_required_indicator_hook():
    hooks.add_filter("required_indicator", lambda indicator, config: "(required)")
    assert required_indicator() == '<span class="shop-required-indicator">(required)</span>'


def test_required_indicator_setting(settings):
    settings.SHOP_REQUIRED_INDICATOR = "!"
    assert required_indicator() == '<span class="shop-required-indicator">!</span>'


def test_checkbox():
    html = checkbox(name="agree", current="on", label="I agree")
    assert html.startswith("<input")
    assert 'type="checkbox"' in html
    assert 'class="shop-checkbox agree"' in html
    assert 'id="agree"' in html
    assert 'checked="checked"' in html
    assert html.endswith('<label for="agree">I agree</label>')


@pytest.mark.parametrize("current", [None, False, 0, "", "0"])
def test_checkbox_unchecked(current):
    assert "checked" not in checkbox(name="agree", current=current)


def test_checkbox_disabled_wins_over_readonly():
    html = checkbox(name="agree", disabled=True, readonly=True)
    assert 'disabled="disabled"' in html
    assert "readonly" not in html
    assert " readonly" in checkbox(name="agree", readonly=True)


def test_checkbox_label_allows_safe_markup():
    html = checkbox(name="terms", label=mark_safe('<a href="/terms">terms</a>'))
    assert '<a href="/terms">terms</a>' in html
    assert "&lt;i&gt;" in checkbox(name="terms", label="<i>x</i>")


def test_textarea():
    html = textarea(name="notes", label="Notes", value="<hi>", desc="Internal")
    assert html == (
        '<span id="shop-notes-wrap">'
        '<label class="shop-label" for="notes">Notes</label>'
        '<textarea name="notes" id="notes" class="large-text">&lt;hi&gt;</textarea>'
        '<span class="shop-description">Internal</span>'
        "</span>"
    )


def test_textarea_wrapper_keeps_full_name():
    html = textarea(name="shop_notes")
    assert html.startswith('<span id="shop-shop_notes-wrap">')
    assert text(name="shop_notes").startswith('<span id="shop-notes-wrap">')


def test_textarea_disabled():
    assert ' disabled="disabled"' in textarea(name="notes", disabled=True)


def test_date_field_adds_datepicker_class_and_format(settings):
    settings.SHOP_DATE_PICKER_FORMAT = "mm/dd/yy"
    html = date_field(name="start", id="start", class_="wide")
    assert "wide" in html
    assert "shop_datepicker" in html
    assert 'data-format="mm/dd/yy"' in html


def test_date_field_does_not_duplicate_class(settings):
    settings.SHOP_DATE_PICKER_FORMAT = "yy-mm-dd"
    html = date_field(name="start", class_="shop_datepicker")
    assert html.count("shop_datepicker") == 1


def test_date_picker_format_from_locale(monkeypatch, settings):
    settings.SHOP_DATE_PICKER_FORMAT = None
    monkeypatch.setattr(inputs.formats, "get_format", lambda name: ["%d.%m.%Y"])
    assert inputs.date_picker_format() == "dd.mm.yy"


def test_ajax_user_search():
    html = ajax_user_search()
    assert html.startswith('<span class="shop_user_search_wrap">')
    assert 'class="shop-ajax-user-search shop-user-dropdown regular-text shop-input user-id"' in html
    assert 'autocomplete="off"' in html
    assert 'placeholder="Enter Username"' in html
    assert '<span class="shop_user_search_results hidden"><span></span></span>' in html
    assert html.endswith('<span class="spinner"></span></span>')
