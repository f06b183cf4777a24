# products/services/categories.py

"""
======================================================
PATH: products/services/categories.py
======================================================
CATEGORY WRITE SERVICES

Rules:
- Name uniqueness is enforced by the database; a collision is reported as
  DuplicateCategoryError (no separate existence pre-check).
- A category referenced by at least one product cannot be deleted.
"""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction

from backend.exceptions import CategoryInUseError, DuplicateCategoryError
from products.models import Category, Product

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Category already exists or name is invalid"
IN_USE_MESSAGE = "Cannot delete a category that still has products"


def create_category(*, name: str) -> Category:
    try:
        with transaction.atomic():
            return Category.objects.create(name=name)
    except IntegrityError as exc:
        raise DuplicateCategoryError(DUPLICATE_MESSAGE) from exc


def update_category(category: Category, *, name: str) -> Category:
    category.name = name
    try:
        with transaction.atomic():
            category.save(update_fields=["name"])
    except IntegrityError as exc:
        raise DuplicateCategoryError(DUPLICATE_MESSAGE) from exc
    return category


def delete_category(category: Category) -> None:
    linked = Product.objects.filter(category_id=category.pk).count()
    if linked:
        logger.info(
            "Refused to delete category in use",
            extra={"category_id": category.pk, "linked_products": linked},
        )
        raise CategoryInUseError(IN_USE_MESSAGE)

    category.delete()
