"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Every
action runs behind the Validation Stage (``validate_request``), calls one
use case and wraps the outcome in the response envelope.  Only
``ProductNotFound`` is translated here; any other exception reaches the
project exception handler and becomes a generic 500.
"""

from __future__ import annotations

from typing import Callable

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.responses import data_response, error_response
from modules.core.validation import validate_request
from modules.products.constants import (
    PRODUCT_DELETED_MESSAGE,
    PRODUCT_NOT_FOUND_MESSAGE,
    VIOLATION_MESSAGES,
)
from modules.products.dtos import CreateProductDTO, ProductIdDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository
from modules.products.serializers import (
    ErrorEnvelope,
    MessageEnvelope,
    ProductCreateRequestSerializer,
    ProductEnvelope,
    ProductListEnvelope,
    ProductSerializer,
    ProductUpdateRequestSerializer,
    ValidationErrorEnvelope,
)
from modules.products.services import ProductService

ID_PARAMETER = OpenApiParameter("id", OpenApiTypes.INT, OpenApiParameter.PATH)

_NOT_FOUND_RESPONSES = {
    400: ValidationErrorEnvelope,
    404: ErrorEnvelope,
}


def _not_found() -> Response:
    return error_response(PRODUCT_NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)


@extend_schema_view(
    list=extend_schema(summary="Get a list of products", responses={200: ProductListEnvelope}),
    retrieve=extend_schema(
        summary="Get a product by ID",
        parameters=[ID_PARAMETER],
        responses={200: ProductEnvelope, **_NOT_FOUND_RESPONSES},
    ),
    create=extend_schema(
        summary="Creates a new product",
        request=ProductCreateRequestSerializer,
        responses={201: ProductEnvelope, 400: ValidationErrorEnvelope},
    ),
    update=extend_schema(
        summary="Updates a product with user input",
        parameters=[ID_PARAMETER],
        request=ProductUpdateRequestSerializer,
        responses={200: ProductEnvelope, **_NOT_FOUND_RESPONSES},
    ),
    partial_update=extend_schema(
        summary="Toggles the availability of a product",
        parameters=[ID_PARAMETER],
        request=None,
        responses={200: ProductEnvelope, **_NOT_FOUND_RESPONSES},
    ),
    destroy=extend_schema(
        summary="Deletes a product by ID",
        parameters=[ID_PARAMETER],
        responses={200: MessageEnvelope, **_NOT_FOUND_RESPONSES},
    ),
)
@extend_schema(tags=["Products"])
class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with the repository built by
    ``repository_factory`` (``ProductDjangoRepository`` unless overridden
    through ``as_view(..., repository_factory=...)``).
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    lookup_url_kwarg = "id"
    # Any single segment reaches the Validation Stage, so a malformed id is a 400.
    # The optional trailing slash is left to the router.
    lookup_value_regex = "[^/]+"

    repository_factory: Callable[[], IProductRepository] = ProductDjangoRepository

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=self.repository_factory())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return data_response(ProductSerializer(products, many=True).data)

    @validate_request(ProductIdDTO, VIOLATION_MESSAGES, with_body=False)
    def retrieve(self, request: Request, dto: ProductIdDTO, **kwargs) -> Response:
        """GET /api/products/{id}"""
        try:
            product = self._service.get_product(dto.id)
        except ProductNotFound:
            return _not_found()
        return data_response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Toggle / Destroy
    # ------------------------------------------------------------------

    @validate_request(CreateProductDTO, VIOLATION_MESSAGES)
    def create(self, request: Request, dto: CreateProductDTO, **kwargs) -> Response:
        """POST /api/products"""
        product = self._service.create_product(dto)
        return data_response(
            ProductSerializer(product).data, status_code=status.HTTP_201_CREATED
        )

    @validate_request(UpdateProductDTO, VIOLATION_MESSAGES)
    def update(self, request: Request, dto: UpdateProductDTO, **kwargs) -> Response:
        """PUT /api/products/{id}"""
        try:
            product = self._service.update_product(dto)
        except ProductNotFound:
            return _not_found()
        return data_response(ProductSerializer(product).data)

    @validate_request(ProductIdDTO, VIOLATION_MESSAGES, with_body=False)
    def partial_update(self, request: Request, dto: ProductIdDTO, **kwargs) -> Response:
        """PATCH /api/products/{id}

        Flips ``availability``; the request body is ignored.
        """
        try:
            product = self._service.toggle_availability(dto.id)
        except ProductNotFound:
            return _not_found()
        return data_response(ProductSerializer(product).data)

    @validate_request(ProductIdDTO, VIOLATION_MESSAGES, with_body=False)
    def destroy(self, request: Request, dto: ProductIdDTO, **kwargs) -> Response:
        """DELETE /api/products/{id}"""
        try:
            self._service.delete_product(dto.id)
        except ProductNotFound:
            return _not_found()
        return data_response(PRODUCT_DELETED_MESSAGE)
