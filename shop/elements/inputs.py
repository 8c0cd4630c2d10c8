"""Text, checkbox, textarea, date and payment card inputs.

``text`` runs two hooks: ``text_args`` receives the :class:`TextConfig` and
may return a changed copy, and ``text_atts`` receives the attribute mapping
(plus the config) right before it is rendered. Attributes whose value is
``None``, ``False`` or an empty string are left out; ``True`` renders as a
bare boolean attribute.
"""

from __future__ import annotations

import re
from collections import OrderedDict
from typing import Any, Dict, List, Mapping, Optional

from django.forms.utils import flatatt
from django.utils import formats, timezone
from django.utils.html import conditional_escape, format_html
from django.utils.safestring import SafeString, mark_safe

from .. import conf
from ..services.hooks import apply_filters, filter_applied
from .config import (
    AjaxUserSearchConfig,
    CardExpirationConfig,
    CheckboxConfig,
    SelectConfig,
    TextareaConfig,
    TextConfig,
)
from .select import select
from .utils import join_classes, sanitize_html_class, sanitize_key, split_classes

DATEPICKER_CLASS = "shop_datepicker"
NAME_PREFIX = "shop_"

# strftime directive -> jQuery UI datepicker token
_DATE_TOKENS = {
    "%Y": "yy",
    "%y": "y",
    "%m": "mm",
    "%d": "dd",
    "%j": "oo",
    "%b": "M",
    "%B": "MM",
    "%a": "D",
    "%A": "DD",
}
_DIRECTIVE_RE = re.compile(r"%[a-zA-Z]")


def _resolve(config_cls, config, options):
    if config is None:
        return config_cls.from_options(options)
    if options:
        return config.replace(**options)
    return config


def _renderable(value: Any) -> bool:
    return value is not None and value is not False and value != ""


def _is_checked(current: Any) -> bool:
    return current not in (None, False, 0, "", "0")


def _with_default_id(config: TextConfig) -> TextConfig:
    if config.id:
        return config
    return config.replace(id=config.name)


def wrapper_id(name: Any) -> str:
    """Return the id of the element wrapping the field called ``name``."""
    return "shop-{}-wrap".format(sanitize_key(str(name or "").replace(NAME_PREFIX, "")))


def required_indicator(config: Any = None) -> SafeString:
    """Return the marker shown next to the label of a required field."""

    indicator = apply_filters("required_indicator", conf.required_indicator(), config)
    return format_html('<span class="shop-required-indicator">{}</span>', indicator)


def date_picker_format() -> str:
    """Return the date format handed to the client-side date picker.

    ``SHOP_DATE_PICKER_FORMAT`` wins; otherwise the first date input format
    of the active locale is translated to date picker tokens.
    """

    configured = conf.date_picker_format()
    if configured:
        return configured
    input_formats = formats.get_format("DATE_INPUT_FORMATS") or ["%Y-%m-%d"]
    return _DIRECTIVE_RE.sub(
        lambda match: _DATE_TOKENS.get(match.group(0), ""), input_formats[0]
    )


def checkbox(config: Optional[CheckboxConfig] = None, **options: Any) -> SafeString:
    """Render a checkbox, checked when ``current`` is set, with an optional label.

    The label may contain markup when it is passed as a safe string.
    """

    config = _resolve(CheckboxConfig, config, options)
    classes = " ".join(
        part for part in (join_classes(split_classes(config.class_)), config.name) if part
    )
    atts: Dict[str, Any] = OrderedDict(type="checkbox")
    if config.disabled:
        atts["disabled"] = "disabled"
    elif config.readonly:
        atts["readonly"] = True
    atts["name"] = config.name
    atts["id"] = config.name
    atts["class"] = classes
    if _is_checked(config.current):
        atts["checked"] = "checked"

    output = format_html("<input{} />", flatatt(atts))
    if config.label:
        output += format_html(
            '<label for="{}">{}</label>',
            config.name or "",
            conditional_escape(config.label),
        )
    return output


def text_attributes(config: TextConfig) -> Dict[str, Any]:
    """Return the input attributes for ``config`` after the ``text_atts`` hook."""

    config = _with_default_id(config)
    classes: List[str] = split_classes(config.class_)
    classes.extend(["regular-text", "shop-input", (config.id or "").replace("_", "-")])
    if config.required:
        classes.append("required")

    atts: Dict[str, Any] = OrderedDict(
        type=config.type,
        id=config.id,
        name=config.name,
    )
    atts["class"] = join_classes(classes)
    atts.update(
        value=config.value,
        required=config.required,
        disabled=config.disabled,
        autocomplete=config.autocomplete,
        placeholder=config.placeholder,
    )
    for key, value in (config.data or {}).items():
        atts[f"data-{sanitize_key(key)}"] = value
    if config.desc:
        atts["aria-describedby"] = f"{config.id}-description"

    atts = apply_filters("text_atts", atts, config)
    return OrderedDict((key, value) for key, value in atts.items() if _renderable(value))


def text(config: Optional[TextConfig] = None, **options: Any) -> SafeString:
    """Render a text input inside a wrapper with optional label and description."""

    config = _resolve(TextConfig, config, options)
    config = apply_filters("text_args", config)
    config = _with_default_id(config)
    atts = text_attributes(config)
    tag = sanitize_key(config.wrapper_tag) or "span"

    parts: List[str] = [
        format_html('<{} id="{}">', mark_safe(tag), wrapper_id(config.name))
    ]
    if config.label:
        parts.append(
            format_html(
                '<label class="shop-label" for="{}">{}{}</label>',
                sanitize_key(config.id),
                config.label,
                required_indicator(config) if config.required else "",
            )
        )
    if config.desc:
        parts.append(
            format_html(
                '<span class="shop-description" id="{}-description">{}</span>',
                config.id,
                config.desc,
            )
        )
    parts.append(format_html("<input{} />", flatatt(atts)))
    parts.append(format_html("</{}>", mark_safe(tag)))
    return mark_safe("".join(parts))


def date_field(config: Optional[TextConfig] = None, **options: Any) -> SafeString:
    """Render a text input wired to the client-side date picker."""

    config = _resolve(TextConfig, config, options)
    classes = split_classes(config.class_)
    if DATEPICKER_CLASS not in classes:
        classes.append(DATEPICKER_CLASS)
    data = dict(config.data or {})
    data.setdefault("format", date_picker_format())
    return text(config.replace(class_=" ".join(classes), data=data))


def _with_classes(atts: Mapping[str, Any], *extra: str) -> Dict[str, Any]:
    atts = OrderedDict(atts)
    atts["class"] = join_classes(split_classes(atts.get("class")) + list(extra))
    return atts


def card_number_attributes(atts: Mapping[str, Any], config: TextConfig) -> Dict[str, Any]:
    atts = _with_classes(atts, "card-number")
    atts.update(size="20", maxlength="20", inputmode="numeric")
    return atts


def card_cvc_attributes(atts: Mapping[str, Any], config: TextConfig) -> Dict[str, Any]:
    atts = _with_classes(atts, "card-cvc")
    atts.update(size="4", maxlength="4", inputmode="numeric")
    return atts


def _card_field(config: TextConfig, attributes_hook) -> SafeString:
    config = config.replace(type="tel", autocomplete="off", required=True)
    with filter_applied("text_atts", attributes_hook):
        return text(config)


def card_number(config: Optional[TextConfig] = None, **options: Any) -> SafeString:
    return _card_field(_resolve(TextConfig, config, options), card_number_attributes)


def card_cvc(config: Optional[TextConfig] = None, **options: Any) -> SafeString:
    return _card_field(_resolve(TextConfig, config, options), card_cvc_attributes)


def card_expiration(
    config: Optional[CardExpirationConfig] = None, **options: Any
) -> SafeString:
    """Render the card expiry month and year selects in one wrapper.

    Years run from the current one to thirty years ahead, shown as two digits.
    """

    config = _resolve(CardExpirationConfig, config, options)
    config = apply_filters("card_expiration_args", config)

    current_year = timezone.localdate().year
    months = OrderedDict((month, f"{month:02d}") for month in range(1, 13))
    years = OrderedDict(
        (year, str(year)[2:]) for year in range(current_year, current_year + 31)
    )

    parts: List[str] = ['<p class="card-expiration" id="shop-card-expiration-wrap">']
    if config.label:
        parts.append(
            format_html(
                '<label class="shop-label" for="card_exp_month">{}{}</label>',
                config.label,
                required_indicator(config),
            )
        )
    if config.desc:
        parts.append(format_html('<span class="shop-description">{}</span>', config.desc))
    parts.append(
        select(
            SelectConfig(
                id="card_exp_month",
                name="card_exp_month",
                options=months,
                class_="card-expiry-month shop-select shop-select-small required",
                show_option_none=False,
                show_option_all=False,
            )
        )
    )
    parts.append('<span class="exp-divider"> / </span>')
    parts.append(
        select(
            SelectConfig(
                id="card_exp_year",
                name="card_exp_year",
                options=years,
                class_="card-expiry-year shop-select shop-select-small required",
                show_option_none=False,
                show_option_all=False,
            )
        )
    )
    parts.append("</p>")
    return mark_safe("".join(parts))


def textarea(config: Optional[TextareaConfig] = None, **options: Any) -> SafeString:
    config = _resolve(TextareaConfig, config, options)
    key = sanitize_key(config.name)

    parts: List[str] = [format_html('<span id="shop-{}-wrap">', key)]
    if config.label:
        parts.append(
            format_html('<label class="shop-label" for="{}">{}</label>', key, config.label)
        )
    parts.append(
        format_html(
            '<textarea name="{}" id="{}" class="{}"{}>{}</textarea>',
            config.name,
            key,
            join_classes(split_classes(config.class_)),
            mark_safe(' disabled="disabled"') if config.disabled else "",
            "" if config.value is None else config.value,
        )
    )
    if config.desc:
        parts.append(format_html('<span class="shop-description">{}</span>', config.desc))
    parts.append("</span>")
    return mark_safe("".join(parts))


def ajax_user_search(
    config: Optional[AjaxUserSearchConfig] = None, **options: Any
) -> SafeString:
    """Render a text input that searches users as the visitor types."""

    config = _resolve(AjaxUserSearchConfig, config, options)
    field = text(
        TextConfig(
            id=config.id,
            name=config.name,
            value=config.value,
            placeholder=config.placeholder,
            label=config.label,
            desc=config.desc,
            class_="shop-ajax-user-search " + sanitize_html_class(config.class_),
            disabled=config.disabled,
            autocomplete=config.autocomplete,
            data=config.data,
        )
    )
    return format_html(
        '<span class="shop_user_search_wrap">{}'
        '<span class="shop_user_search_results hidden"><span></span></span>'
        '<span class="spinner"></span></span>',
        field,
    )


__all__ = [
    "wrapper_id",
    "required_indicator",
    "date_picker_format",
    "checkbox",
    "text_attributes",
    "text",
    "date_field",
    "card_number_attributes",
    "card_cvc_attributes",
    "card_number",
    "card_cvc",
    "card_expiration",
    "textarea",
    "ajax_user_search",
]
