"""Configuration records for the form element renderers.

Each renderer takes keyword options that are validated against one of the
frozen dataclasses below, so an unknown option raises ``TypeError`` instead
of being ignored. ``class`` is a keyword in Python; the records call it
``class_`` and :meth:`ElementConfig.from_options` accepts either spelling.
Defaults that need translation are computed when the record is built, in
the active language.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from django.utils.translation import gettext, pgettext

from .. import conf

Selection = Union[None, int, str, list, tuple]


class ElementConfig:
    """Mixin with constructors shared by every configuration record."""

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None, **overrides):
        merged: Dict[str, Any] = dict(options or {})
        merged.update(overrides)
        if "class" in merged:
            merged["class_"] = merged.pop("class")
        return cls(**merged)

    def replace(self, **changes):
        if "class" in changes:
            changes["class_"] = changes.pop("class")
        return dataclasses.replace(self, **changes)


def _search_data(search_type: str, placeholder: str) -> Dict[str, str]:
    return {"search-type": search_type, "search-placeholder": placeholder}


@dataclass(frozen=True)
class SelectConfig(ElementConfig):
    options: Mapping[Any, Any] = field(default_factory=dict)
    name: Optional[str] = None
    class_: str = ""
    id: str = ""
    selected: Selection = 0
    chosen: bool = False
    placeholder: Optional[str] = None
    multiple: bool = False
    show_option_all: Union[str, bool] = field(
        default_factory=lambda: pgettext("all dropdown items", "All")
    )
    show_option_none: Union[str, bool] = field(
        default_factory=lambda: pgettext("no dropdown items", "None")
    )
    data: Mapping[str, Any] = field(default_factory=dict)
    readonly: bool = False
    disabled: bool = False


def _product_placeholder() -> str:
    return gettext("Choose a %s") % conf.product_labels()["singular"]


def _product_data() -> Dict[str, str]:
    return _search_data(
        "download", gettext("Search %s") % conf.product_labels()["plural"]
    )


@dataclass(frozen=True)
class ProductDropdownConfig(ElementConfig):
    name: str = "products"
    id: str = "products"
    class_: str = ""
    multiple: bool = False
    selected: Selection = 0
    chosen: bool = False
    number: int = field(default_factory=conf.dropdown_number)
    bundles: bool = True
    variations: bool = False
    placeholder: str = field(default_factory=_product_placeholder)
    show_option_all: Union[str, bool] = False
    data: Mapping[str, Any] = field(default_factory=_product_data)


@dataclass(frozen=True)
class CustomerDropdownConfig(ElementConfig):
    name: str = "customers"
    id: str = "customers"
    class_: str = ""
    multiple: bool = False
    selected: Selection = 0
    chosen: bool = True
    placeholder: str = field(default_factory=lambda: gettext("Choose a Customer"))
    number: int = field(default_factory=conf.dropdown_number)
    data: Mapping[str, Any] = field(
        default_factory=lambda: _search_data("customer", gettext("Search Customers"))
    )
    none_selected: str = field(
        default_factory=lambda: gettext("No customer attached")
    )


@dataclass(frozen=True)
class UserDropdownConfig(ElementConfig):
    name: str = "users"
    id: str = "users"
    class_: str = ""
    multiple: bool = False
    selected: Selection = 0
    chosen: bool = True
    placeholder: str = field(default_factory=lambda: gettext("Select a User"))
    number: int = field(default_factory=conf.dropdown_number)
    data: Mapping[str, Any] = field(
        default_factory=lambda: _search_data("user", gettext("Search Users"))
    )


@dataclass(frozen=True)
class DiscountDropdownConfig(ElementConfig):
    name: str = "discounts"
    id: str = "discounts"
    class_: str = ""
    multiple: bool = False
    selected: Selection = 0
    chosen: bool = True
    placeholder: str = field(default_factory=lambda: gettext("Choose a Discount"))
    show_option_all: Union[str, bool] = field(
        default_factory=lambda: gettext("All Discounts")
    )
    number: int = field(default_factory=conf.dropdown_number)
    status: str = ""
    data: Mapping[str, Any] = field(
        default_factory=lambda: _search_data("discount", gettext("Search Discounts"))
    )


@dataclass(frozen=True)
class CategoryDropdownConfig(ElementConfig):
    name: str = "shop_categories"
    selected: Selection = 0


@dataclass(frozen=True)
class YearDropdownConfig(ElementConfig):
    name: str = "year"
    selected: Selection = 0
    years_before: int = 5
    years_after: int = 0


@dataclass(frozen=True)
class MonthDropdownConfig(ElementConfig):
    name: str = "month"
    selected: Selection = 0


@dataclass(frozen=True)
class CheckboxConfig(ElementConfig):
    name: Optional[str] = None
    current: Any = None
    class_: str = "shop-checkbox"
    disabled: bool = False
    readonly: bool = False
    label: str = ""


@dataclass(frozen=True)
class TextConfig(ElementConfig):
    type: str = "text"
    id: str = ""
    name: str = "text"
    value: Any = None
    label: Optional[str] = None
    desc: Optional[str] = None
    placeholder: str = ""
    class_: str = ""
    disabled: bool = False
    autocomplete: Union[str, bool] = False
    data: Optional[Mapping[str, Any]] = None
    required: bool = False
    wrapper_tag: str = "span"


@dataclass(frozen=True)
class TextareaConfig(ElementConfig):
    name: str = "textarea"
    value: Any = None
    label: Optional[str] = None
    desc: Optional[str] = None
    class_: str = "large-text"
    disabled: bool = False


@dataclass(frozen=True)
class CardExpirationConfig(ElementConfig):
    label: Optional[str] = None
    desc: Optional[str] = None


@dataclass(frozen=True)
class AjaxUserSearchConfig(ElementConfig):
    id: str = "user_id"
    name: str = "user_id"
    value: Any = None
    placeholder: str = field(default_factory=lambda: gettext("Enter Username"))
    label: Optional[str] = None
    desc: Optional[str] = None
    class_: str = "shop-user-dropdown"
    disabled: bool = False
    autocomplete: Union[str, bool] = "off"
    data: Optional[Mapping[str, Any]] = None


__all__ = [
    "ElementConfig",
    "SelectConfig",
    "ProductDropdownConfig",
    "CustomerDropdownConfig",
    "UserDropdownConfig",
    "DiscountDropdownConfig",
    "CategoryDropdownConfig",
    "YearDropdownConfig",
    "MonthDropdownConfig",
    "CheckboxConfig",
    "TextConfig",
    "TextareaConfig",
    "CardExpirationConfig",
    "AjaxUserSearchConfig",
]
