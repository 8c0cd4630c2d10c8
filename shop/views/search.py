"""Search endpoint behind the enhanced-search dropdowns.

Dropdowns carry ``data-search-type`` and ``data-search-placeholder``
attributes; the client-side widget queries this endpoint with the typed
term and replaces the options with the results.
"""

import logging
from typing import Any, Dict, List

from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from .. import conf
from ..elements.config import ProductDropdownConfig
from ..elements.dropdowns import product_query
from ..serializers import OptionSerializer, SearchQuerySerializer
from ..services import catalog
from ..services.product_values import ProductValue

logger = logging.getLogger(__name__)


def _product_results(params: Dict[str, Any], user) -> List[Dict[str, str]]:
    config = ProductDropdownConfig(
        number=params["number"],
        bundles=params["bundles"],
        variations=params["variations"],
    )
    query = dict(product_query(config, user))
    query["search"] = params["q"]
    results = []
    for product in catalog.get_products(query):
        results.append({"value": str(product.pk), "label": product.title})
        if config.variations and catalog.has_variable_prices(product):
            for index, price in catalog.get_variable_prices(product).items():
                if price.get("name"):
                    results.append(
                        {
                            "value": str(ProductValue(product.pk, index)),
                            "label": f"{product.title}: {price['name']}",
                        }
                    )
    return results


def _customer_results(params: Dict[str, Any], user) -> List[Dict[str, str]]:
    return [
        {"value": str(customer.pk), "label": customer.display_label}
        for customer in catalog.get_customers(params["number"], search=params["q"])
    ]


def _user_results(params: Dict[str, Any], user) -> List[Dict[str, str]]:
    return [
        {"value": str(found.pk), "label": catalog.get_user_display_name(found)}
        for found in catalog.get_users(params["number"], search=params["q"])
    ]


def _discount_results(params: Dict[str, Any], user) -> List[Dict[str, str]]:
    return [
        {"value": str(discount.pk), "label": discount.name}
        for discount in catalog.get_discounts(params["number"], search=params["q"])
    ]


SEARCHES = {
    "download": _product_results,
    "customer": _customer_results,
    "user": _user_results,
    "discount": _discount_results,
}


class DropdownSearchView(APIView):
    """Return dropdown options matching a search term.

    Query params:
        type: one of ``download``, ``customer``, ``user`` or ``discount``.
        q: search term matched against names (and emails or codes).
        number: maximum number of entities, defaults to the dropdown size.
        variations, bundles: product searches only.
    """

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        query = SearchQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = dict(query.validated_data)
        params.setdefault("number", conf.dropdown_number())
        logger.debug("Dropdown search: %s", params)
        results = SEARCHES[params["type"]](params, request.user)
        return Response(OptionSerializer(results, many=True).data)
