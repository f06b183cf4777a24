from .categories import create_category, delete_category, update_category
from .stats import catalog_stats

__all__ = [
    "create_category",
    "update_category",
    "delete_category",
    "catalog_stats",
]
