"""Generic ``<select>`` renderer used by every dropdown."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString, mark_safe
from django.utils.translation import get_language_bidi

from .config import SelectConfig
from .utils import normalize_selection, split_classes

BASE_CLASS = "shop-select"
CHOSEN_CLASS = "shop-select-chosen"
RTL_CLASS = "chosen-rtl"

ALL_VALUE = "all"
NONE_VALUE = "-1"


def _select_classes(config: SelectConfig) -> str:
    classes: List[str] = [BASE_CLASS]
    classes.extend(split_classes(config.class_))
    if config.chosen:
        classes.append(CHOSEN_CLASS)
        if get_language_bidi():
            classes.append(RTL_CLASS)
    unique: List[str] = []
    for cls in classes:
        if cls not in unique:
            unique.append(cls)
    return " ".join(unique)


def _option(value: Any, label: Any, is_selected: bool) -> SafeString:
    if is_selected:
        return format_html(
            '<option value="{}" selected="selected">{}</option>', value, label
        )
    return format_html('<option value="{}">{}</option>', value, label)


def _data_attributes(data: Optional[Mapping[str, Any]]) -> SafeString:
    if not data:
        return mark_safe("")
    return format_html_join(
        "", ' data-{}="{}"', ((key, value) for key, value in data.items())
    )


def render_options(
    options: Mapping[Any, Any], selection: Iterable[str]
) -> SafeString:
    """Return ``<option>`` markup for ``options`` in insertion order.

    ``selection`` holds the selected values as strings; every option is
    checked against it on its own.
    """

    selection = set(selection)
    return mark_safe(
        "".join(
            _option(value, label, str(value) in selection)
            for value, label in options.items()
        )
    )


def select(config: Optional[SelectConfig] = None, **options: Any) -> SafeString:
    """Render a ``<select>`` element.

    Accepts a :class:`SelectConfig` or the same settings as keyword
    arguments. The ``"all"`` option is shown when ``show_option_all`` is set
    and is selected when nothing (or ``0``) is selected. The ``"-1"`` option
    is shown when ``show_option_none`` is set and there is at least one
    option. ``id`` falls back to ``name``.
    """

    if config is None:
        config = SelectConfig.from_options(options)
    elif options:
        config = config.replace(**options)

    selection = normalize_selection(config.selected)
    parts: List[str] = [
        format_html(
            '<select name="{}" id="{}" class="{}"',
            config.name or "",
            (config.id or config.name or "").replace("-", "_"),
            _select_classes(config),
        )
    ]
    if config.multiple:
        parts.append(' multiple="multiple"')
    if config.disabled:
        parts.append(' disabled="disabled"')
    if config.readonly:
        parts.append(' readonly="readonly"')
    parts.append(format_html(' data-placeholder="{}"', config.placeholder or ""))
    parts.append(_data_attributes(config.data))
    parts.append(">")

    if config.show_option_all:
        parts.append(
            _option(
                ALL_VALUE,
                config.show_option_all,
                not selection or "0" in selection,
            )
        )

    if config.options:
        if config.show_option_none:
            parts.append(
                _option(NONE_VALUE, config.show_option_none, NONE_VALUE in selection)
            )
        parts.append(render_options(config.options, selection))

    parts.append("</select>")
    return mark_safe("".join(parts))


__all__ = ["select", "render_options", "ALL_VALUE", "NONE_VALUE"]
