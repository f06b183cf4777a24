# products/serializers/__init__.py

from .category import CategorySerializer
from .product import ProductSerializer
from .stats import CatalogStatsSerializer

__all__ = [
    "CategorySerializer",
    "ProductSerializer",
    "CatalogStatsSerializer",
]
