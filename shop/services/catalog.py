"""Read-only catalog queries used to populate dropdowns.

Single-entity lookups return ``None`` when nothing matches. Database errors
are not caught here.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any, Dict, List, Mapping, Optional

from django.contrib.auth import get_user_model
from django.db.models import Q

from ..models import Category, Customer, Discount, PriceOption, Product

logger = logging.getLogger(__name__)

ORDERABLE_PRODUCT_FIELDS = {"title", "id", "created_at", "updated_at", "price"}


def _to_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def get_products(query: Mapping[str, Any]) -> List[Product]:
    """Return products matching ``query``.

    Recognised keys: ``status`` (iterable of status values), ``order_by``,
    ``order`` (``"ASC"``/``"DESC"``), ``number`` (result bound; ``-1`` or
    ``None`` for no bound), ``exclude_product_types``, ``include`` and
    ``search``.
    """

    qs = Product.objects.all()
    statuses = query.get("status")
    if statuses:
        qs = qs.filter(status__in=list(statuses))
    excluded_types = query.get("exclude_product_types")
    if excluded_types:
        qs = qs.exclude(product_type__in=list(excluded_types))
    include = query.get("include")
    if include:
        qs = qs.filter(pk__in=list(include))
    search = (query.get("search") or "").strip()
    if search:
        qs = qs.filter(title__icontains=search)

    order_by = query.get("order_by") or "title"
    if order_by not in ORDERABLE_PRODUCT_FIELDS:
        order_by = "title"
    direction = str(query.get("order") or "ASC").upper()
    qs = qs.order_by(order_by if direction != "DESC" else f"-{order_by}", "id")

    number = _to_int(query.get("number"))
    if number is not None and number >= 0:
        qs = qs[:number]
    return list(qs)


def get_product(product_id: Any) -> Optional[Product]:
    pk = _to_int(product_id)
    if pk is None:
        return None
    return Product.objects.filter(pk=pk).first()


def get_product_title(product_id: Any) -> str:
    """Return the title of ``product_id`` or an empty string if unknown."""
    product = get_product(product_id)
    return product.title if product else ""


def get_variable_prices(product: Any) -> "OrderedDict[int, Dict[str, Any]]":
    """Return the price options of ``product`` keyed by their index.

    ``product`` may be a :class:`Product` or a product id. Each value is a
    mapping with ``name`` and ``amount`` keys.
    """

    product_id = product.pk if isinstance(product, Product) else _to_int(product)
    prices: "OrderedDict[int, Dict[str, Any]]" = OrderedDict()
    if product_id is None:
        return prices
    for option in PriceOption.objects.filter(product_id=product_id).order_by("index"):
        prices[option.index] = {"name": option.name, "amount": option.amount}
    return prices


def has_variable_prices(product: Any) -> bool:
    """Return ``True`` if ``product`` uses variable pricing and has options."""

    if not isinstance(product, Product):
        product = get_product(product)
    if product is None or not product.variable_pricing:
        return False
    return product.price_options.exists()


def get_customers(number: Optional[int] = None, search: str = "") -> List[Customer]:
    qs = Customer.objects.order_by("name", "id")
    search = (search or "").strip()
    if search:
        qs = qs.filter(Q(name__icontains=search) | Q(email__icontains=search))
    if number is not None and number >= 0:
        qs = qs[:number]
    return list(qs)


def get_customer(customer_id: Any) -> Optional[Customer]:
    pk = _to_int(customer_id)
    if pk is None:
        return None
    return Customer.objects.filter(pk=pk).first()


def get_users(number: Optional[int] = None, search: str = "") -> list:
    User = get_user_model()
    qs = User.objects.order_by(User.USERNAME_FIELD)
    search = (search or "").strip()
    if search:
        qs = qs.filter(
            Q(**{f"{User.USERNAME_FIELD}__icontains": search})
            | Q(first_name__icontains=search)
            | Q(last_name__icontains=search)
            | Q(email__icontains=search)
        )
    if number is not None and number >= 0:
        qs = qs[:number]
    return list(qs)


def get_user(user_id: Any):
    pk = _to_int(user_id)
    if pk is None:
        return None
    return get_user_model().objects.filter(pk=pk).first()


def get_user_display_name(user) -> str:
    """Return the full name of ``user``, falling back to the username."""

    full_name = ""
    if hasattr(user, "get_full_name"):
        full_name = (user.get_full_name() or "").strip()
    return full_name or user.get_username()


def get_discounts(
    number: Optional[int] = None, status: str = "", search: str = ""
) -> List[Discount]:
    qs = Discount.objects.order_by("name", "id")
    if status:
        qs = qs.filter(status=status)
    search = (search or "").strip()
    if search:
        qs = qs.filter(Q(name__icontains=search) | Q(code__icontains=search))
    if number is not None and number >= 0:
        qs = qs[:number]
    return list(qs)


def get_discount(discount_id: Any) -> Optional[Discount]:
    pk = _to_int(discount_id)
    if pk is None:
        return None
    return Discount.objects.filter(pk=pk).first()


def get_categories(args: Optional[Mapping[str, Any]] = None) -> List[Category]:
    """Return product categories.

    Recognised ``args`` keys: ``parent`` (id, or ``0`` for top level only),
    ``hide_empty`` (skip categories without products), ``order_by``
    (``"name"`` or ``"id"``), ``order`` and ``number``.
    """

    args = dict(args or {})
    qs = Category.objects.all()
    if "parent" in args:
        parent = _to_int(args["parent"])
        qs = qs.filter(parent__isnull=True) if not parent else qs.filter(parent_id=parent)
    if args.get("hide_empty"):
        qs = qs.filter(products__isnull=False).distinct()
    order_by = args.get("order_by") if args.get("order_by") in {"name", "id"} else "name"
    direction = str(args.get("order") or "ASC").upper()
    qs = qs.order_by(order_by if direction != "DESC" else f"-{order_by}")
    number = _to_int(args.get("number"))
    if number is not None and number > 0:
        qs = qs[:number]
    return list(qs)


def get_category(category_id: Any) -> Optional[Category]:
    pk = _to_int(category_id)
    if pk is None:
        return None
    return Category.objects.filter(pk=pk).first()


def get_taxonomy_labels() -> Dict[str, str]:
    """Return the display labels of the product category taxonomy."""

    meta = Category._meta
    return {
        "name": str(meta.verbose_name_plural).title(),
        "singular_name": str(meta.verbose_name).title(),
    }


__all__ = [
    "get_products",
    "get_product",
    "get_product_title",
    "get_variable_prices",
    "has_variable_prices",
    "get_customers",
    "get_customer",
    "get_users",
    "get_user",
    "get_user_display_name",
    "get_discounts",
    "get_discount",
    "get_categories",
    "get_category",
    "get_taxonomy_labels",
]
