import re

from django.utils import timezone, translation

from shop.elements import month_dropdown, year_dropdown


def _option_values(html):
    return re.findall(r'<option value="([^"]*)"', html)


def _selected_values(html):
    return re.findall(r'<option value="([^"]*)" selected="selected">', html)


def test_year_dropdown_defaults():
    year = timezone.localdate().year
    html = year_dropdown(years_before=5, years_after=0)
    assert _option_values(html) == [str(y) for y in range(year - 5, year + 1)]
    assert _selected_values(html) == [str(year)]
    assert html.startswith('<select name="year" id="year"')


def test_year_dropdown_range_after_current():
    year = timezone.localdate().year
    html = year_dropdown(name="exp_year", years_before=0, years_after=2, selected=year + 1)
    assert _option_values(html) == [str(year), str(year + 1), str(year + 2)]
    assert _selected_values(html) == [str(year + 1)]


def test_year_dropdown_has_no_sentinels():
    html = year_dropdown()
    assert 'value="all"' not in html
    assert 'value="-1"' not in html


def test_month_dropdown():
    with translation.override("en"):
        html = month_dropdown()
    assert _option_values(html) == [str(m) for m in range(1, 13)]
    assert '<option value="1"' in html and ">January</option>" in html
    assert ">December</option>" in html
    assert _selected_values(html) == [str(timezone.localdate().month)]


def test_month_dropdown_selected_month():
    html = month_dropdown(name="m", selected=3)
    assert _selected_values(html) == ["3"]


def test_month_names_are_localized():
    with translation.override("fr"):
        html = month_dropdown()
    assert "janvier" in html.lower()
