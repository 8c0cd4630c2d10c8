"""Application settings for the shop app with their defaults.

Values are read from Django settings on every access so tests can override
them with ``settings`` fixtures or ``override_settings``.
"""

from typing import Dict, Optional

from django.conf import settings

DEFAULT_PRODUCT_LABELS = {"singular": "Download", "plural": "Downloads"}
DEFAULT_DROPDOWN_NUMBER = 30
DEFAULT_EDIT_PRODUCTS_PERMISSION = "shop.change_product"
DEFAULT_REQUIRED_INDICATOR = "*"


def product_labels() -> Dict[str, str]:
    """Return the singular and plural display labels for products."""
    labels = dict(DEFAULT_PRODUCT_LABELS)
    labels.update(getattr(settings, "SHOP_PRODUCT_LABELS", None) or {})
    return labels


def dropdown_number() -> int:
    """Return how many entities an entity dropdown fetches by default."""
    try:
        return int(getattr(settings, "SHOP_DROPDOWN_NUMBER", DEFAULT_DROPDOWN_NUMBER))
    except (TypeError, ValueError):
        return DEFAULT_DROPDOWN_NUMBER


def edit_products_permission() -> str:
    return getattr(
        settings, "SHOP_EDIT_PRODUCTS_PERMISSION", DEFAULT_EDIT_PRODUCTS_PERMISSION
    )


def date_picker_format() -> Optional[str]:
    """Return the configured date picker format, or ``None`` to use the locale."""
    return getattr(settings, "SHOP_DATE_PICKER_FORMAT", None)


def required_indicator() -> str:
    return getattr(settings, "SHOP_REQUIRED_INDICATOR", DEFAULT_REQUIRED_INDICATOR)


__all__ = [
    "product_labels",
    "dropdown_number",
    "edit_products_permission",
    "date_picker_format",
    "required_indicator",
]
