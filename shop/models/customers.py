from django.conf import settings
from django.db import models


class Customer(models.Model):
    """A purchasing customer, optionally linked to a site user."""

    name = models.CharField(max_length=255, blank=True)
    email = models.EmailField(unique=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        models.SET_NULL,
        blank=True,
        null=True,
        related_name="customers",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:  # pragma: no cover - simple representation
        return self.display_label

    @property
    def display_label(self) -> str:
        return f"{self.name} ({self.email})"
