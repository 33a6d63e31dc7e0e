"""Product service layer (Use Cases).

Orchestrates the Product use cases, delegating persistence to the
injected ``IProductRepository``.  Each use case performs at most one
write, and a missing product short-circuits before any write happens.

Full update and availability toggle are read-modify-write sequences; they
run inside a transaction and read the row through ``get_for_update`` so
concurrent writers on the same product are serialized by the database.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product, newest first."""
        return self._repo.list()

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(f"Product {id} not found.")
        return product

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        product = self._repo.create(dto.model_dump())
        logger.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def update_product(self, dto: UpdateProductDTO) -> Product:
        """Overwrite name, price and availability of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._locked_product(dto.id)
        for field, value in dto.changes().items():
            setattr(product, field, value)
        product = self._repo.save(product)
        logger.info("product.updated", product_id=dto.id)
        return product

    @transaction.atomic
    def toggle_availability(self, id: int) -> Product:
        """Flip the availability flag of a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._locked_product(id)
        product.availability = not product.availability
        product = self._repo.save(product)
        logger.info(
            "product.availability_toggled",
            product_id=id,
            availability=product.availability,
        )
        return product

    def delete_product(self, id: int) -> None:
        """Permanently remove a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)
        self._repo.delete(product)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _locked_product(self, id: int) -> Product:
        product = self._repo.get_for_update(id)
        if not product:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(f"Product {id} not found.")
        return product
