"""Form element renderers.

Every renderer returns a safe HTML string and accepts either its
configuration record or the record's fields as keyword arguments::

    product_dropdown(name="download_id", selected=12, user=request.user)
    text(name="shop_email", id="shop-email", label="Email", required=True)
"""

from .dropdowns import (
    category_dropdown,
    customer_dropdown,
    discount_dropdown,
    month_dropdown,
    product_dropdown,
    user_dropdown,
    year_dropdown,
)
from .inputs import (
    ajax_user_search,
    card_cvc,
    card_expiration,
    card_number,
    checkbox,
    date_field,
    required_indicator,
    text,
    textarea,
)
from .select import select

__all__ = [
    "select",
    "product_dropdown",
    "customer_dropdown",
    "user_dropdown",
    "discount_dropdown",
    "category_dropdown",
    "year_dropdown",
    "month_dropdown",
    "checkbox",
    "text",
    "textarea",
    "date_field",
    "card_number",
    "card_cvc",
    "card_expiration",
    "required_indicator",
    "ajax_user_search",
]
