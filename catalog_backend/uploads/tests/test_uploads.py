# uploads/tests/test_uploads.py

"""
UPLOAD / DOWNLOAD TESTS

GUARANTEES:
- Uploads land in UPLOADS_DIR under a generated image-<ms>-<rand><ext> name
- Missing file -> 400, missing download -> 404
- Both endpoints require a bearer token
- Stored files are reachable read-only under /uploads/
"""

import os
import re
import shutil
import tempfile

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from rest_framework import status
from rest_framework.test import APIClient

from backend.exceptions import UploadNotFoundError
from uploads.services import generated_name, resolve_download
from users.tests.helpers import authenticated_client

PNG_BYTES = b"\x89PNG\r\n\x1a\n fake image body"


class GeneratedNameTests(TestCase):
    def test_shape_and_lowercased_extension(self):
        name = generated_name("Holiday Photo.PNG")

        self.assertRegex(name, r"^image-\d+-\d+\.png$")

    def test_unsafe_extension_is_dropped(self):
        self.assertRegex(generated_name("evil.p#p"), r"^image-\d+-\d+$")
        self.assertRegex(generated_name("no_extension"), r"^image-\d+-\d+$")


class UploadApiTests(TestCase):
    def setUp(self):
        self.uploads_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.uploads_dir, ignore_errors=True)
        override = override_settings(UPLOADS_DIR=self.uploads_dir)
        override.enable()
        self.addCleanup(override.disable)

        self.admin = authenticated_client()

    def _upload(self, client=None):
        client = client or self.admin
        image = SimpleUploadedFile("shirt.JPG", PNG_BYTES, content_type="image/jpeg")
        return client.post("/api/upload", {"image": image}, format="multipart")

    def test_upload_stores_file_and_returns_url(self):
        res = self._upload()

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        url = res.data["imageUrl"]
        self.assertTrue(re.match(r"^/uploads/image-\d+-\d+\.jpg$", url), url)

        stored = os.path.join(self.uploads_dir, url.rsplit("/", 1)[1])
        with open(stored, "rb") as fh:
            self.assertEqual(fh.read(), PNG_BYTES)

    def test_upload_without_file_is_400(self):
        res = self.admin.post("/api/upload", {}, format="multipart")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data, {"error": "No file uploaded"})

    def test_upload_requires_token(self):
        res = self._upload(client=APIClient())

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(os.listdir(self.uploads_dir), [])

    def test_download_returns_attachment(self):
        name = self._upload().data["imageUrl"].rsplit("/", 1)[1]

        res = self.admin.get(f"/api/download/{name}")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertIn("attachment", res["Content-Disposition"])
        self.assertEqual(b"".join(res.streaming_content), PNG_BYTES)

    def test_download_missing_file_is_404(self):
        res = self.admin.get("/api/download/image-1-1.png")

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.json(), {"error": "File not found"})

    def test_download_requires_token(self):
        res = APIClient().get("/api/download/anything.png")

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_traversal_outside_uploads_is_not_found(self):
        with self.assertRaises(UploadNotFoundError):
            resolve_download("../secrets.txt")

    def test_uploaded_file_is_served_publicly(self):
        url = self._upload().data["imageUrl"]

        res = APIClient().get(url)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(b"".join(res.streaming_content), PNG_BYTES)
