# products/models/category.py

from django.db import models


class Category(models.Model):
    """
    Product grouping shown as a storefront filter.

    - name is unique (collisions surface as DuplicateCategoryError)
    - deleting is refused while any product still points at it
    """

    name = models.CharField(max_length=255, unique=True)

    class Meta:
        db_table = "categories"
        ordering = ["id"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name
