# users/tests/helpers.py

from __future__ import annotations

from rest_framework.test import APIClient

from users.authentication import issue_token
from users.models import User


def create_admin(*, username: str = "owner@example.com", password: str = "S3cret!pass"):
    return User.objects.create_user(username=username, password=password)


def authenticated_client(user=None) -> APIClient:
    """APIClient carrying a fresh bearer token for `user` (a new admin when omitted)."""
    user = user or create_admin()
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(user)}")
    return client
