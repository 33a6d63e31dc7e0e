"""Product model.

The table holds a flat record: name, price and an availability flag.
Request validation happens before any write reaches the model; the check
constraint on ``price`` only backs it up at the database level.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel

NAME_MAX_LENGTH = 100


class Product(TimestampedModel):
    """A product of the catalogue."""

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    price = models.FloatField()
    availability = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"#{self.id} - {self.name}"
