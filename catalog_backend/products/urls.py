# products/urls.py

"""
PRODUCTS URLS

Purpose:
- Register catalog routes directly under /api/ (no trailing slash):
    /api/products, /api/products/<id>
    /api/categories, /api/categories/<id>
    /api/stats
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from products.views import CatalogStatsView, CategoryViewSet, ProductViewSet

router = SimpleRouter(trailing_slash=False)

router.register(r"categories", CategoryViewSet, basename="categories")
router.register(r"products", ProductViewSet, basename="products")

urlpatterns = [
    path("stats", CatalogStatsView.as_view(), name="catalog-stats"),
    path("", include(router.urls)),
]
