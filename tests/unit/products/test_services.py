"""Unit tests for ProductService.

Covers:
- list_products / get_product: delegation, not found.
- create_product: fields handed to the repository, one creation log event.
- update_product: overwrite, not found short-circuits before any write.
- toggle_availability: negation, other fields untouched.
- delete_product: removes the loaded record, not found.
"""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.save.side_effect = lambda p: p
    return repo


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _product(**overrides) -> Product:
    defaults = {"id": 1, "name": "Mouse", "price": 50.00, "availability": True}
    defaults.update(overrides)
    return Product(**defaults)


# ===========================================================================
# Queries
# ===========================================================================


class TestListProducts:
    def test_delegates_to_repo(self, service, mock_repo):
        products = [_product(id=2), _product(id=1)]
        mock_repo.list.return_value = products

        assert service.list_products() == products
        mock_repo.list.assert_called_once_with()


class TestGetProduct:
    def test_success(self, service, mock_repo):
        existing = _product()
        mock_repo.get_by_id.return_value = existing

        assert service.get_product(1) is existing
        mock_repo.get_by_id.assert_called_once_with(1)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.get_product(404)


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_passes_validated_fields(self, service, mock_repo):
        mock_repo.create.side_effect = lambda fields: _product(**fields)

        product = service.create_product(CreateProductDTO(name="Mouse", price=50))

        mock_repo.create.assert_called_once_with(
            {"name": "Mouse", "price": 50, "availability": True}
        )
        assert product.name == "Mouse"
        mock_repo.save.assert_not_called()

    def test_logs_one_creation_event(self, caplog):
        service = ProductService(repository=ProductDjangoRepository())
        with caplog.at_level(logging.INFO):
            product = service.create_product(CreateProductDTO(name="Mouse", price=50))
        messages = [r.getMessage() for r in caplog.records]
        creation = [m for m in messages if "product.created" in m]
        assert len(creation) == 1
        assert not [m for m in messages if "product_created" in m or "product.inserted" in m]
        assert Product.objects.filter(id=product.id).exists()


# ===========================================================================
# update_product
# ===========================================================================


class TestUpdateProduct:
    def test_overwrites_all_fields(self, service, mock_repo):
        existing = _product()
        mock_repo.get_for_update.return_value = existing

        dto = UpdateProductDTO(id=1, name="Mouse Pro", price=75, availability=False)
        product = service.update_product(dto)

        assert product.name == "Mouse Pro"
        assert product.price == 75
        assert product.availability is False
        assert product.id == 1
        mock_repo.save.assert_called_once_with(existing)

    def test_not_found_raises_without_writing(self, service, mock_repo):
        mock_repo.get_for_update.return_value = None

        dto = UpdateProductDTO(id=9, name="Ghost", price=1, availability=True)
        with pytest.raises(ProductNotFound):
            service.update_product(dto)

        mock_repo.save.assert_not_called()


# ===========================================================================
# toggle_availability
# ===========================================================================


class TestToggleAvailability:
    @pytest.mark.parametrize("initial", [True, False])
    def test_negates_availability(self, service, mock_repo, initial):
        mock_repo.get_for_update.return_value = _product(availability=initial)

        product = service.toggle_availability(1)

        assert product.availability is (not initial)
        mock_repo.save.assert_called_once()

    def test_leaves_other_fields_unchanged(self, service, mock_repo):
        mock_repo.get_for_update.return_value = _product()

        product = service.toggle_availability(1)

        assert (product.id, product.name, product.price) == (1, "Mouse", 50.00)

    def test_not_found_raises_without_writing(self, service, mock_repo):
        mock_repo.get_for_update.return_value = None

        with pytest.raises(ProductNotFound):
            service.toggle_availability(1)

        mock_repo.save.assert_not_called()


# ===========================================================================
# delete_product
# ===========================================================================


class TestDeleteProduct:
    def test_deletes_loaded_record(self, service, mock_repo):
        existing = _product()
        mock_repo.get_by_id.return_value = existing

        service.delete_product(1)

        mock_repo.delete.assert_called_once_with(existing)

    def test_not_found_raises_without_deleting(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.delete_product(1)

        mock_repo.delete.assert_not_called()
