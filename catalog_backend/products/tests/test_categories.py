# products/tests/test_categories.py

"""
CATEGORY TESTS

GUARANTEES:
- Names are unique (DB constraint -> 400 with a readable message)
- Delete is blocked while products reference the category
- Listing is public and ordered by id
"""

from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from backend.exceptions import CategoryInUseError, DuplicateCategoryError
from products.models import Category, Product
from products.services import create_category, delete_category, update_category
from users.tests.helpers import authenticated_client


class CategoryServiceTests(TestCase):
    def test_duplicate_name_raises(self):
        create_category(name="Books")

        with self.assertRaises(DuplicateCategoryError):
            create_category(name="Books")

        self.assertEqual(Category.objects.count(), 1)

    def test_rename_onto_existing_name_raises(self):
        create_category(name="Books")
        games = create_category(name="Games")

        with self.assertRaises(DuplicateCategoryError):
            update_category(games, name="Books")

        self.assertEqual(Category.objects.get(pk=games.pk).name, "Games")

    def test_delete_in_use_raises(self):
        books = create_category(name="Books")
        Product.objects.create(name="Atlas", price=10, category=books)

        with self.assertRaises(CategoryInUseError):
            delete_category(books)

        self.assertTrue(Category.objects.filter(pk=books.pk).exists())


class CategoryApiTests(TestCase):
    def setUp(self):
        self.admin = authenticated_client()

    def test_public_list_ordered_by_id(self):
        Category.objects.create(name="Zeta")
        Category.objects.create(name="Alpha")

        res = APIClient().get("/api/categories")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([c["name"] for c in res.data], ["Zeta", "Alpha"])

    def test_duplicate_create_is_400(self):
        self.admin.post("/api/categories", {"name": "Books"}, format="json")

        res = self.admin.post("/api/categories", {"name": "Books"}, format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data, {"error": "Category already exists or name is invalid"})

    def test_blank_name_is_400(self):
        res = self.admin.post("/api/categories", {"name": "  "}, format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_rename(self):
        books = Category.objects.create(name="Books")

        res = self.admin.put(f"/api/categories/{books.id}", {"name": "Novels"}, format="json")

        self.assertEqual(res.data, {"success": True})
        books.refresh_from_db()
        self.assertEqual(books.name, "Novels")

    def test_books_atlas_lifecycle(self):
        created = self.admin.post("/api/categories", {"name": "Books"}, format="json")
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)
        books_id = created.data["id"]

        product = self.admin.post(
            "/api/products",
            {"name": "Atlas", "price": 30, "stock": 2, "category_id": books_id},
            format="json",
        )
        self.assertEqual(product.status_code, status.HTTP_201_CREATED)

        listed = APIClient().get("/api/products")
        self.assertEqual(listed.data[0]["category"], "Books")

        blocked = self.admin.delete(f"/api/categories/{books_id}")
        self.assertEqual(blocked.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("error", blocked.data)
        self.assertTrue(Category.objects.filter(pk=books_id).exists())

        self.admin.delete(f"/api/products/{product.data['id']}")
        freed = self.admin.delete(f"/api/categories/{books_id}")
        self.assertEqual(freed.data, {"success": True})
        self.assertFalse(Category.objects.filter(pk=books_id).exists())
