"""
PATH: users/models/user.py

ADMINISTRATOR ACCOUNT MODEL

Rules:
- Every row is a store administrator (there is no customer account).
- username is the login identifier (unique, non-null).
- password is stored as a salted hash via Django's password hashers.
- Accounts are never created over the API; the startup bootstrap seeds the
  single fixed administrator (see users.services.ensure_admin_account).
"""

from __future__ import annotations

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models


# ---------------- USER MANAGER ----------------
class UserManager(BaseUserManager):
    def create_user(self, username, password=None, **extra_fields):
        username = (username or "").strip()
        if not username:
            raise ValueError("Users must have a username")

        user = self.model(username=username, **extra_fields)

        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.save(using=self._db)
        return user


# ---------------- USER MODEL ----------------
class User(AbstractBaseUser):
    username = models.CharField(max_length=150, unique=True)

    created_at = models.DateTimeField(auto_now_add=True)

    objects = UserManager()

    USERNAME_FIELD = "username"
    REQUIRED_FIELDS = []

    class Meta:
        db_table = "users"
        ordering = ["id"]

    def __str__(self):
        return self.username
