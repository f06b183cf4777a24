# products/services/stats.py

"""
PATH: products/services/stats.py

CATALOG STATS (dashboard header)

- totalProducts / totalCategories: row counts
- avgPrice: mean product price, 0 when there are no products
- stockValue: sum of price * stock, 0 when there are no products
- categoryStats: every category with its product count (LEFT JOIN, so an
  empty category reports 0), in category id order
"""

from __future__ import annotations

from django.db.models import Avg, Count, F, FloatField, Sum

from products.models import Category, Product


def catalog_stats() -> dict:
    totals = Product.objects.aggregate(
        total_products=Count("id"),
        avg_price=Avg("price"),
        stock_value=Sum(F("price") * F("stock"), output_field=FloatField()),
    )

    category_stats = [
        {"name": row["name"], "count": row["count"]}
        for row in Category.objects.annotate(count=Count("products"))
        .order_by("id")
        .values("name", "count")
    ]

    return {
        "totalProducts": totals["total_products"],
        "totalCategories": Category.objects.count(),
        "avgPrice": totals["avg_price"] or 0,
        "stockValue": totals["stock_value"] or 0,
        "categoryStats": category_stats,
    }
