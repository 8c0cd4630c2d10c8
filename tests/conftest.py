import os
import sys

import django
import pytest

# Ensure project root is on sys.path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "shop_site.settings")
django.setup()

from shop.models import Category, Customer, Discount, PriceOption, Product  # noqa: E402
from shop.services import hooks  # noqa: E402


@pytest.fixture(autouse=True)
def reset_hooks():
    """Drop filters registered by a test so they do not leak into the next one."""
    yield
    hooks.clear_filters()


@pytest.fixture
def product_factory():
    def create_product(**kwargs):
        defaults = {
            "title": "Product",
            "status": Product.Status.PUBLISH,
            "product_type": Product.ProductType.DEFAULT,
        }
        defaults.update(kwargs)
        prices = defaults.pop("prices", None)
        if prices:
            defaults["variable_pricing"] = True
        product = Product.objects.create(**defaults)
        for index, name in (prices or {}).items():
            PriceOption.objects.create(product=product, index=index, name=name, amount=10)
        return product

    return create_product


@pytest.fixture
def customer_factory():
    def create_customer(**kwargs):
        defaults = {"name": "Customer", "email": f"c{Customer.objects.count()}@example.com"}
        defaults.update(kwargs)
        return Customer.objects.create(**defaults)

    return create_customer


@pytest.fixture
def discount_factory():
    def create_discount(**kwargs):
        defaults = {
            "name": "Discount",
            "code": f"CODE{Discount.objects.count()}",
            "status": Discount.Status.ACTIVE,
        }
        defaults.update(kwargs)
        return Discount.objects.create(**defaults)

    return create_discount


@pytest.fixture
def category_factory():
    def create_category(name, **kwargs):
        kwargs.setdefault("slug", name.lower().replace(" ", "-"))
        return Category.objects.create(name=name, **kwargs)

    return create_category


@pytest.fixture
def staff_user(django_user_model):
    """A user allowed to edit products."""
    from django.contrib.auth.models import Permission

    user = django_user_model.objects.create_user(username="editor", password="pw")
    user.user_permissions.add(Permission.objects.get(codename="change_product"))
    return django_user_model.objects.get(pk=user.pk)
