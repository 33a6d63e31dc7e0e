"""Base abstract models shared by the domain modules."""

from __future__ import annotations

from django.db import models


class TimestampedModel(models.Model):
    """Abstract base with ``created_at`` / ``updated_at`` bookkeeping.

    The primary key is the project-wide ``BigAutoField`` (integer surrogate
    key assigned by the database on insert).
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
