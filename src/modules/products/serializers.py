"""Product DRF serializers.

``ProductSerializer`` renders a Product for API responses.  Input is
validated by the pydantic DTOs in ``dtos.py``; the remaining serializers
only describe the request and envelope shapes for the OpenAPI schema.
"""

from __future__ import annotations

from drf_spectacular.utils import inline_serializer
from rest_framework import serializers

from modules.products.models import NAME_MAX_LENGTH, Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "availability",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProductCreateRequestSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=NAME_MAX_LENGTH)
    price = serializers.FloatField()
    availability = serializers.BooleanField(required=False, default=True)


class ProductUpdateRequestSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=NAME_MAX_LENGTH)
    price = serializers.FloatField()
    availability = serializers.BooleanField()


# ---------------------------------------------------------------------------
# Envelopes (documentation only)
# ---------------------------------------------------------------------------

ProductEnvelope = inline_serializer(
    name="ProductEnvelope",
    fields={"data": ProductSerializer()},
)

ProductListEnvelope = inline_serializer(
    name="ProductListEnvelope",
    fields={"data": ProductSerializer(many=True)},
)

MessageEnvelope = inline_serializer(
    name="MessageEnvelope",
    fields={"data": serializers.CharField()},
)

ErrorEnvelope = inline_serializer(
    name="ErrorEnvelope",
    fields={"error": serializers.CharField()},
)

ValidationErrorEnvelope = inline_serializer(
    name="ValidationErrorEnvelope",
    fields={
        "errors": serializers.ListField(
            child=inline_serializer(
                name="Violation",
                fields={
                    "field": serializers.CharField(),
                    "message": serializers.CharField(),
                },
            )
        )
    },
)
