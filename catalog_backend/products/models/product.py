# products/models/product.py

from django.core.validators import MinValueValidator
from django.db import models

from .category import Category


class Product(models.Model):
    """
    Represents a catalog product.

    CATEGORY REFERENCE (IMPORTANT):
    - category_id is a lenient reference: no database constraint is declared
    - category deletes go through the in-use guard, but a row removed out of
      band leaves products pointing at a missing id
    - the storefront reads the category name through a LEFT JOIN, so a
      dangling or empty reference simply shows no category

    STOCK:
    - plain on-hand counter, never negative, defaults to 0
    - older databases gain the column through migration 0002
    """

    name = models.CharField(max_length=255)
    price = models.FloatField(validators=[MinValueValidator(0)])
    stock = models.PositiveIntegerField(default=0)
    description = models.TextField(blank=True, default="")

    category = models.ForeignKey(
        Category,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        blank=True,
        related_name="products",
    )

    image = models.CharField(max_length=500, blank=True, default="")

    class Meta:
        db_table = "products"
        ordering = ["id"]

    def __str__(self):
        return self.name
