from django.db import models

from .fields import PriceField


class Discount(models.Model):
    """A discount code that can be applied at checkout."""

    class Status(models.TextChoices):
        ACTIVE = "active", "Active"
        INACTIVE = "inactive", "Inactive"
        EXPIRED = "expired", "Expired"
        ARCHIVED = "archived", "Archived"

    name = models.CharField(max_length=255)
    code = models.CharField(max_length=50, unique=True)
    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.ACTIVE
    )
    amount = PriceField()

    def __str__(self) -> str:  # pragma: no cover - simple representation
        return self.name or self.code
