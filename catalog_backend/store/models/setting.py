# store/models/setting.py

from django.db import models


class StoreSetting(models.Model):
    """
    One key/value pair of storefront appearance.

    Known keys: storeName, primaryColor, layoutMode, fontFamily.
    Any other key is accepted and stored as-is (values are always text).
    """

    key = models.CharField(max_length=100, primary_key=True)
    value = models.TextField(blank=True, default="")

    class Meta:
        db_table = "settings"
        ordering = ["key"]

    def __str__(self):
        return f"{self.key}={self.value}"
