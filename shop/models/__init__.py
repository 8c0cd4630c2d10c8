from .categories import Category
from .customers import Customer
from .discounts import Discount
from .fields import PriceField
from .products import PriceOption, Product

__all__ = [
    "Category",
    "Customer",
    "Discount",
    "PriceField",
    "PriceOption",
    "Product",
]
