"""Unit tests for ProductDjangoRepository.

Covers:
- get_by_id / get_for_update: found and missing.
- list: ordering by id descending.
- create / save: persistence.
- delete: hard delete.
"""

from __future__ import annotations

import pytest

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


def _make_product(**overrides) -> Product:
    defaults = {"name": "Widget", "price": 19.99}
    defaults.update(overrides)
    return Product.objects.create(**defaults)


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


class TestGetById:
    def test_returns_product_when_found(self, repo):
        product = _make_product()
        result = repo.get_by_id(product.id)
        assert result is not None
        assert result.id == product.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id(999_999) is None


class TestGetForUpdate:
    def test_returns_product_inside_transaction(self, repo):
        from django.db import transaction

        product = _make_product()
        with transaction.atomic():
            result = repo.get_for_update(product.id)
        assert result is not None
        assert result.id == product.id

    def test_returns_none_when_not_found(self, repo):
        from django.db import transaction

        with transaction.atomic():
            assert repo.get_for_update(999_999) is None


class TestList:
    def test_returns_empty_list_when_no_products(self, repo):
        assert repo.list() == []

    def test_ordered_by_id_descending(self, repo):
        first = _make_product(name="First")
        second = _make_product(name="Second")
        third = _make_product(name="Third")
        assert [p.id for p in repo.list()] == [third.id, second.id, first.id]

    def test_ordering_ignores_names(self, repo):
        z = _make_product(name="Zeta")
        a = _make_product(name="Alpha")
        assert [p.name for p in repo.list()] == [a.name, z.name]


class TestCreate:
    def test_assigns_id_and_persists(self, repo):
        product = repo.create(
            {"name": "Mouse", "price": 50, "availability": True}
        )
        assert product.id is not None
        assert Product.objects.filter(id=product.id).exists()

    def test_availability_defaults_when_omitted(self, repo):
        product = repo.create({"name": "Mouse", "price": 50})
        product.refresh_from_db()
        assert product.availability is True


class TestSave:
    def test_updates_existing_product(self, repo):
        product = _make_product()
        product.name = "Updated Name"
        returned = repo.save(product)
        product.refresh_from_db()
        assert returned is product
        assert product.name == "Updated Name"


class TestDelete:
    def test_hard_deletes(self, repo):
        product = _make_product()
        pk = product.id
        repo.delete(product)
        assert not Product.objects.filter(id=pk).exists()
        assert repo.get_by_id(pk) is None
