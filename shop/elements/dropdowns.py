"""Dropdowns populated from the catalog: products, customers, users and more.

Every entity dropdown fetches a bounded list, then makes sure each selected
value is present in the options even when it fell outside that bound, so a
saved selection is never dropped from the rendered field.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any, Dict, List, Optional, Tuple

from django.utils import timezone
from django.utils.dates import MONTHS
from django.utils.safestring import SafeString
from django.utils.translation import gettext, pgettext

from .. import conf
from ..models import Product
from ..services import catalog
from ..services.hooks import apply_filters
from ..services.product_values import ProductValue
from .config import (
    CategoryDropdownConfig,
    CustomerDropdownConfig,
    DiscountDropdownConfig,
    MonthDropdownConfig,
    ProductDropdownConfig,
    SelectConfig,
    UserDropdownConfig,
    YearDropdownConfig,
)
from .select import ALL_VALUE, select
from .utils import normalize_selection

logger = logging.getLogger(__name__)

PRIVILEGED_STATUSES = ["publish", "draft", "private", "future"]
PUBLIC_STATUSES = ["publish"]


def _missing(selection: Tuple[str, ...], options) -> List[str]:
    """Return selected values that have no option yet, in selection order."""
    keys = {str(key) for key in options}
    return [value for value in selection if value not in keys]


def _join_classes(*classes: str) -> str:
    return " ".join(cls for cls in classes if cls)


# Products ----------------------------------------------------------------


def product_statuses(user=None) -> List[str]:
    """Return the product statuses ``user`` may pick from.

    Users holding the edit-products permission see unpublished products as
    well. Hook results that are not a list or tuple fall back to published
    only.
    """

    if user is not None and user.has_perm(conf.edit_products_permission()):
        statuses = apply_filters("product_dropdown_status", list(PRIVILEGED_STATUSES))
    else:
        statuses = apply_filters(
            "product_dropdown_status_nopriv", list(PUBLIC_STATUSES)
        )
    if not isinstance(statuses, (list, tuple)):
        logger.debug("Ignoring invalid product status filter %r", statuses)
        return list(PUBLIC_STATUSES)
    return [str(status).strip() for status in statuses]


def product_query(config: ProductDropdownConfig, user=None) -> Dict[str, Any]:
    """Return the product query for ``config`` after the args hook ran."""

    query: Dict[str, Any] = {
        "order_by": "title",
        "order": "ASC",
        "number": config.number,
        "status": product_statuses(user),
    }
    if not config.bundles:
        query["exclude_product_types"] = [Product.ProductType.BUNDLE]
    query = apply_filters("product_dropdown_args", query)
    logger.debug("Product dropdown query: %s", query)
    return query


def _variant_label(title: str, price_name: str) -> str:
    return f"{title}: {price_name}"


def _add_product_options(options, product: Product, variations: bool) -> None:
    options[product.pk] = product.title
    if variations and catalog.has_variable_prices(product):
        for index, price in catalog.get_variable_prices(product).items():
            if price.get("name"):
                value = ProductValue(product.pk, index)
                options[value.option_key] = _variant_label(product.title, price["name"])


def _include_selected_product(options, value: ProductValue) -> None:
    if value.has_price:
        prices = catalog.get_variable_prices(value.product_id)
        price = prices.get(value.price_id)
        if price and price.get("name"):
            title = catalog.get_product_title(value.product_id)
            options[value.option_key] = _variant_label(title, price["name"])
        else:
            logger.debug("Selected price option %s not found; skipping", value)
        return
    product = catalog.get_product(value.product_id)
    if product is None:
        logger.debug("Selected product %s not found; skipping", value)
        return
    options[product.pk] = product.title


def product_options(
    config: ProductDropdownConfig, user=None
) -> "OrderedDict[Any, str]":
    """Return the option mapping for a product dropdown.

    The mapping starts with an empty ``0`` option. Selected products outside
    the fetched list are loaded individually; a selected variant also pulls
    in its product.
    """

    products = catalog.get_products(product_query(config, user))
    selection = normalize_selection(config.selected)

    fetched_ids = {str(product.pk) for product in products}
    for raw in selection:
        if raw in fetched_ids:
            continue
        value = ProductValue.parse(raw)
        if value is None or str(value.product_id) in fetched_ids:
            continue
        product = catalog.get_product(value.product_id)
        if product is not None:
            products.append(product)
            fetched_ids.add(str(product.pk))

    options: "OrderedDict[Any, str]" = OrderedDict()
    options[0] = ""
    for product in products:
        _add_product_options(options, product, config.variations)

    for raw in _missing(selection, options):
        value = ProductValue.parse(raw)
        if value is not None:
            _include_selected_product(options, value)

    options.pop(ALL_VALUE, None)
    return options


def product_dropdown(
    config: Optional[ProductDropdownConfig] = None, *, user=None, **options: Any
) -> SafeString:
    """Render a dropdown of products (downloads).

    ``user`` decides which product statuses are listed; anonymous callers and
    users without the edit-products permission only see published products.
    """

    if config is None:
        config = ProductDropdownConfig.from_options(options)
    elif options:
        config = config.replace(**options)

    class_ = config.class_
    if not config.bundles:
        class_ = _join_classes(class_, "no-bundles")
    if config.variations:
        class_ = _join_classes(class_, "variations")

    return select(
        SelectConfig(
            name=config.name,
            selected=config.selected,
            id=config.id,
            class_=class_,
            options=product_options(config, user),
            chosen=config.chosen,
            multiple=config.multiple,
            placeholder=config.placeholder,
            show_option_all=config.show_option_all,
            show_option_none=False,
            data=config.data,
        )
    )


# Customers, users and discounts -----------------------------------------


def customer_options(config: CustomerDropdownConfig) -> "OrderedDict[Any, str]":
    customers = catalog.get_customers(config.number)
    options: "OrderedDict[Any, str]" = OrderedDict()
    if customers:
        options[0] = config.none_selected
        for customer in customers:
            options[customer.pk] = customer.display_label
    else:
        options[0] = gettext("No customers found")

    for raw in _missing(normalize_selection(config.selected), options):
        customer = catalog.get_customer(raw)
        if customer is None:
            logger.debug("Selected customer %s not found; skipping", raw)
            continue
        options[customer.pk] = customer.display_label
    return options


def customer_dropdown(
    config: Optional[CustomerDropdownConfig] = None, **options: Any
) -> SafeString:
    """Render a dropdown of customers labelled ``name (email)``."""

    if config is None:
        config = CustomerDropdownConfig.from_options(options)
    elif options:
        config = config.replace(**options)

    return select(
        SelectConfig(
            name=config.name,
            selected=config.selected,
            id=config.id,
            class_=_join_classes(config.class_, "shop-customer-select"),
            options=customer_options(config),
            multiple=config.multiple,
            placeholder=config.placeholder,
            chosen=config.chosen,
            show_option_all=False,
            show_option_none=False,
            data=config.data,
        )
    )


def user_options(config: UserDropdownConfig) -> "OrderedDict[Any, str]":
    users = catalog.get_users(config.number)
    options: "OrderedDict[Any, str]" = OrderedDict()
    if users:
        for user in users:
            options[user.pk] = catalog.get_user_display_name(user)
    else:
        options[0] = gettext("No users found")

    for raw in _missing(normalize_selection(config.selected), options):
        user = catalog.get_user(raw)
        if user is None:
            logger.debug("Selected user %s not found; skipping", raw)
            continue
        options[user.pk] = catalog.get_user_display_name(user)
    return options


def user_dropdown(
    config: Optional[UserDropdownConfig] = None, **options: Any
) -> SafeString:
    if config is None:
        config = UserDropdownConfig.from_options(options)
    elif options:
        config = config.replace(**options)

    return select(
        SelectConfig(
            name=config.name,
            selected=config.selected,
            id=config.id,
            class_=_join_classes(config.class_, "shop-user-select"),
            options=user_options(config),
            multiple=config.multiple,
            placeholder=config.placeholder,
            chosen=config.chosen,
            show_option_all=False,
            show_option_none=False,
            data=config.data,
        )
    )


def discount_options(config: DiscountDropdownConfig) -> "OrderedDict[Any, str]":
    discounts = catalog.get_discounts(config.number, status=config.status)
    options: "OrderedDict[Any, str]" = OrderedDict()
    if discounts:
        for discount in discounts:
            options[discount.pk] = discount.name
    else:
        options[0] = gettext("No discounts found")

    for raw in _missing(normalize_selection(config.selected), options):
        discount = catalog.get_discount(raw)
        if discount is None:
            logger.debug("Selected discount %s not found; skipping", raw)
            continue
        options[discount.pk] = discount.name
    options.pop(ALL_VALUE, None)
    return options


def discount_dropdown(
    config: Optional[DiscountDropdownConfig] = None, **options: Any
) -> SafeString:
    """Render a dropdown of discounts, optionally limited to one ``status``."""

    if config is None:
        config = DiscountDropdownConfig.from_options(options)
    elif options:
        config = config.replace(**options)

    return select(
        SelectConfig(
            name=config.name,
            selected=config.selected,
            id=config.id,
            class_=_join_classes(config.class_, "shop-discount-select"),
            options=discount_options(config),
            multiple=config.multiple,
            placeholder=config.placeholder,
            chosen=config.chosen,
            show_option_all=config.show_option_all,
            show_option_none=False,
            data=config.data,
        )
    )


# Categories and dates ----------------------------------------------------


def category_options(config: CategoryDropdownConfig) -> "OrderedDict[Any, str]":
    args = apply_filters("category_dropdown_args", {})
    options: "OrderedDict[Any, str]" = OrderedDict(
        (category.pk, category.name) for category in catalog.get_categories(args)
    )
    for raw in _missing(normalize_selection(config.selected), options):
        category = catalog.get_category(raw)
        if category is None:
            logger.debug("Selected category %s not found; skipping", raw)
            continue
        options[category.pk] = category.name
    return options


def category_dropdown(
    config: Optional[CategoryDropdownConfig] = None, **options: Any
) -> SafeString:
    if config is None:
        config = CategoryDropdownConfig.from_options(options)
    elif options:
        config = config.replace(**options)

    labels = catalog.get_taxonomy_labels()
    return select(
        SelectConfig(
            name=config.name,
            selected=config.selected,
            options=category_options(config),
            show_option_all=pgettext('plural: Example: "All Categories"', "All %s")
            % labels["name"],
            show_option_none=False,
        )
    )


def year_dropdown(
    config: Optional[YearDropdownConfig] = None, **options: Any
) -> SafeString:
    """Render a dropdown of years around the current one, ascending.

    The current year is selected when nothing else is.
    """

    if config is None:
        config = YearDropdownConfig.from_options(options)
    elif options:
        config = config.replace(**options)

    current = timezone.localdate().year
    start = current - abs(int(config.years_before))
    end = current + abs(int(config.years_after))
    year_options = OrderedDict((year, year) for year in range(start, end + 1))

    return select(
        SelectConfig(
            name=config.name,
            selected=config.selected or current,
            options=year_options,
            show_option_all=False,
            show_option_none=False,
        )
    )


def month_dropdown(
    config: Optional[MonthDropdownConfig] = None, **options: Any
) -> SafeString:
    """Render a dropdown of the twelve months, the current one selected by default."""

    if config is None:
        config = MonthDropdownConfig.from_options(options)
    elif options:
        config = config.replace(**options)

    month_options = OrderedDict((month, str(MONTHS[month])) for month in range(1, 13))
    return select(
        SelectConfig(
            name=config.name,
            selected=config.selected or timezone.localdate().month,
            options=month_options,
            show_option_all=False,
            show_option_none=False,
        )
    )


__all__ = [
    "product_statuses",
    "product_query",
    "product_options",
    "product_dropdown",
    "customer_options",
    "customer_dropdown",
    "user_options",
    "user_dropdown",
    "discount_options",
    "discount_dropdown",
    "category_options",
    "category_dropdown",
    "year_dropdown",
    "month_dropdown",
]
