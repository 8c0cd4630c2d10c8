"""Template tags exposing the form element renderers.

Usage::

    {% load shop_elements %}
    {% product_dropdown name="download_id" selected=order.download_id user=request.user %}
    {% text name="shop_email" id="shop-email" label="Email" required=True %}
"""

from django import template

from .. import elements

register = template.Library()


@register.simple_tag
def product_dropdown(user=None, **options):
    return elements.product_dropdown(user=user, **options)


@register.simple_tag(takes_context=True)
def product_dropdown_for_request(context, **options):
    """Render a product dropdown for the user of the current request."""
    request = context.get("request")
    return elements.product_dropdown(user=getattr(request, "user", None), **options)


_SIMPLE_RENDERERS = [
    "select",
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
    "ajax_user_search",
]

for _name in _SIMPLE_RENDERERS:
    register.simple_tag(getattr(elements, _name), name=_name)


@register.simple_tag
def required_indicator():
    return elements.required_indicator()
