# banners/tests/test_banners.py

"""
BANNER TESTS

GUARANTEES:
- Public list shows active banners only
- Admin list shows every banner
- active defaults to true on create and is a real boolean in output
"""

from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from banners.models import Banner
from users.tests.helpers import authenticated_client


class BannerApiTests(TestCase):
    def setUp(self):
        self.admin = authenticated_client()
        self.live = Banner.objects.create(title="Summer", image="/uploads/s.png")
        self.hidden = Banner.objects.create(title="Winter", image="/uploads/w.png", active=False)

    def test_public_list_shows_active_only(self):
        res = APIClient().get("/api/banners")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([b["id"] for b in res.data], [self.live.id])
        self.assertIs(res.data[0]["active"], True)

    def test_admin_list_shows_all(self):
        res = self.admin.get("/api/admin/banners")

        self.assertEqual([b["id"] for b in res.data], [self.live.id, self.hidden.id])
        self.assertIs(res.data[1]["active"], False)

    def test_admin_list_requires_token(self):
        res = APIClient().get("/api/admin/banners")

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_create_defaults_to_active(self):
        res = self.admin.post(
            "/api/banners",
            {"title": "New", "subtitle": "Now open", "image": "/uploads/n.png"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertTrue(Banner.objects.get(pk=res.data["id"]).active)

    def test_create_requires_image(self):
        res = self.admin.post("/api/banners", {"title": "No image"}, format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("image", res.data["fields"])

    def test_put_coerces_active(self):
        res = self.admin.put(
            f"/api/banners/{self.hidden.id}",
            {"title": "Winter", "image": "/uploads/w.png", "active": 1},
            format="json",
        )

        self.assertEqual(res.data, {"success": True})
        self.hidden.refresh_from_db()
        self.assertIs(self.hidden.active, True)

    def test_put_without_active_deactivates(self):
        self.admin.put(
            f"/api/banners/{self.live.id}",
            {"title": "Summer", "image": "/uploads/s.png"},
            format="json",
        )

        self.live.refresh_from_db()
        self.assertFalse(self.live.active)

    def test_delete(self):
        res = self.admin.delete(f"/api/banners/{self.live.id}")

        self.assertEqual(res.data, {"success": True})
        self.assertFalse(Banner.objects.filter(pk=self.live.pk).exists())

    def test_anonymous_delete_is_401(self):
        res = APIClient().delete(f"/api/banners/{self.live.id}")

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertTrue(Banner.objects.filter(pk=self.live.pk).exists())
