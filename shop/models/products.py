from django.db import models

from .fields import PriceField


class Product(models.Model):
    """A sellable download and its publication state."""

    class Status(models.TextChoices):
        PUBLISH = "publish", "Published"
        DRAFT = "draft", "Draft"
        PENDING = "pending", "Pending review"
        PRIVATE = "private", "Private"
        FUTURE = "future", "Scheduled"

    class ProductType(models.TextChoices):
        DEFAULT = "default", "Default"
        BUNDLE = "bundle", "Bundle"

    title = models.CharField(max_length=255)
    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.DRAFT
    )
    product_type = models.CharField(
        max_length=20, choices=ProductType.choices, default=ProductType.DEFAULT
    )
    variable_pricing = models.BooleanField(default=False)
    price = PriceField(blank=True, null=True)
    categories = models.ManyToManyField(
        "shop.Category", blank=True, related_name="products"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:  # pragma: no cover - simple representation
        return self.title or f"Product {self.pk}"

    @property
    def is_bundle(self) -> bool:
        return self.product_type == self.ProductType.BUNDLE


class PriceOption(models.Model):
    """A named, separately priced variant of a product.

    ``index`` is the variant key used in composite dropdown values
    (``<product id>_<index>``) and is unique per product.
    """

    product = models.ForeignKey(
        Product, models.CASCADE, related_name="price_options"
    )
    index = models.PositiveIntegerField()
    name = models.CharField(max_length=255, blank=True)
    amount = PriceField()

    def __str__(self) -> str:  # pragma: no cover - simple representation
        return f"{self.product}: {self.name or self.index}"

    class Meta:
        ordering = ["product_id", "index"]
        constraints = [
            models.UniqueConstraint(
                fields=["product", "index"], name="unique_price_option_index"
            )
        ]
