from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from rest_framework.test import APIClient

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def sample_product():
    """A persisted Product instance."""
    return Product.objects.create(name="Monitor", price=399.00)


class InMemoryProductRepository(IProductRepository):
    """Dict-backed repository double; counts the writes it receives."""

    def __init__(self) -> None:
        self._rows: Dict[int, Product] = {}
        self._next_id = 1
        self.writes = 0

    def get_by_id(self, id: int) -> Optional[Product]:
        return self._rows.get(id)

    def get_for_update(self, id: int) -> Optional[Product]:
        return self._rows.get(id)

    def list(self) -> List[Product]:
        return [self._rows[key] for key in sorted(self._rows, reverse=True)]

    def create(self, fields: Dict[str, Any]) -> Product:
        product = Product(id=self._next_id, **fields)
        self._rows[product.id] = product
        self._next_id += 1
        self.writes += 1
        return product

    def save(self, entity: Product) -> Product:
        self._rows[entity.id] = entity
        self.writes += 1
        return entity

    def delete(self, entity: Product) -> None:
        del self._rows[entity.id]
        self.writes += 1


@pytest.fixture()
def memory_repo():
    return InMemoryProductRepository()
