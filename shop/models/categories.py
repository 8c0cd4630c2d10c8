from django.db import models


class Category(models.Model):
    """A product category term; categories may be nested one under another."""

    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    parent = models.ForeignKey(
        "self", models.CASCADE, blank=True, null=True, related_name="children"
    )

    def __str__(self) -> str:  # pragma: no cover - simple representation
        return self.name

    class Meta:
        ordering = ["name"]
        verbose_name = "product category"
        verbose_name_plural = "product categories"
