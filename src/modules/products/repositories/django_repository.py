"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising — the Service Layer decides how to translate a
missing entity into an API response.  Database failures are not caught.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        return Product.objects.filter(id=id).first()

    def get_for_update(self, id: int) -> Optional[Product]:
        return Product.objects.select_for_update().filter(id=id).first()

    def list(self) -> List[Product]:
        """List every product, newest ``id`` first."""
        return list(Product.objects.order_by("-id"))

    def create(self, fields: Dict[str, Any]) -> Product:
        return Product.objects.create(**fields)

    def save(self, entity: Product) -> Product:
        """Persist changes to an existing product."""
        entity.save()
        logger.info("product.saved", product_id=entity.id)
        return entity

    def delete(self, entity: Product) -> None:
        """Hard-delete a product; the row is gone afterwards."""
        product_id = entity.id
        entity.delete()
        logger.info("product.deleted", product_id=product_id)
