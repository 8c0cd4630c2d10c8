from decimal import Decimal

import pytest

from shop.elements.config import ProductDropdownConfig, TextConfig
from shop.models import PriceOption, Product
from shop.services import catalog


@pytest.mark.django_db
def test_get_products_filters_and_bounds(product_factory):
    product_factory(title="C")
    product_factory(title="A")
    product_factory(title="B", product_type=Product.ProductType.BUNDLE)
    product_factory(title="D", status=Product.Status.DRAFT)

    titles = [p.title for p in catalog.get_products({"status": ["publish"]})]
    assert titles == ["A", "B", "C"]

    titles = [
        p.title
        for p in catalog.get_products(
            {"status": ["publish"], "exclude_product_types": ["bundle"], "number": 1}
        )
    ]
    assert titles == ["A"]

    titles = [p.title for p in catalog.get_products({"order": "DESC", "order_by": "bogus"})]
    assert titles == ["D", "C", "B", "A"]


@pytest.mark.django_db
def test_single_lookups_return_none_when_missing():
    assert catalog.get_product(999) is None
    assert catalog.get_product("all") is None
    assert catalog.get_product_title(999) == ""
    assert catalog.get_customer(999) is None
    assert catalog.get_user("x") is None
    assert catalog.get_discount(999) is None
    assert catalog.get_category(None) is None


@pytest.mark.django_db
def test_variable_prices(product_factory):
    product = product_factory(title="Course", prices={2: "Pro", 1: "Basic"})
    prices = catalog.get_variable_prices(product)
    assert list(prices) == [1, 2]
    assert prices[2]["name"] == "Pro"
    assert catalog.get_variable_prices(product.pk) == prices
    assert catalog.has_variable_prices(product)
    assert catalog.has_variable_prices(product.pk)


@pytest.mark.django_db
def test_variable_pricing_flag_required(product_factory):
    product = product_factory(title="Flat")
    PriceOption.objects.create(product=product, index=1, name="Orphan", amount=1)
    assert not catalog.has_variable_prices(product)
    assert not catalog.has_variable_prices(12345)


@pytest.mark.django_db
def test_price_field_coerces_invalid_values(product_factory):
    product = product_factory(title="Free", price=None)
    product.refresh_from_db()
    assert product.price == Decimal("0")
    assert Product._meta.get_field("price").to_python("n/a") == Decimal("0")


@pytest.mark.django_db
def test_categories_hide_empty(product_factory, category_factory):
    used = category_factory("Used")
    category_factory("Empty")
    product = product_factory(title="A")
    product.categories.add(used)
    assert [c.name for c in catalog.get_categories({"hide_empty": True})] == ["Used"]
    assert [c.name for c in catalog.get_categories()] == ["Empty", "Used"]


def test_taxonomy_labels():
    assert catalog.get_taxonomy_labels() == {
        "name": "Product Categories",
        "singular_name": "Product Category",
    }


def test_config_accepts_class_keyword():
    config = TextConfig.from_options({"class": "wide", "name": "first"})
    assert config.class_ == "wide"
    assert config.replace(**{"class": "narrow"}).class_ == "narrow"


def test_product_labels_setting(settings):
    settings.SHOP_PRODUCT_LABELS = {"singular": "Ebook", "plural": "Ebooks"}
    settings.SHOP_DROPDOWN_NUMBER = 12
    config = ProductDropdownConfig()
    assert config.placeholder == "Choose a Ebook"
    assert config.data["search-placeholder"] == "Search Ebooks"
    assert config.number == 12
