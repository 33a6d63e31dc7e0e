"""Product URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.products.views import ProductViewSet

router = SimpleRouter()
# /api/products and /api/products/ resolve to the same route.
router.trailing_slash = "/?"
router.register("products", ProductViewSet, basename="product")

urlpatterns = router.urls
