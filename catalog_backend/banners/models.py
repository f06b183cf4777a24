# banners/models.py

from django.db import models


class Banner(models.Model):
    """
    Hero banner on the storefront.

    Only active banners are listed publicly; the dashboard sees all of them.
    """

    title = models.CharField(max_length=255, blank=True, default="")
    subtitle = models.CharField(max_length=255, blank=True, default="")
    image = models.CharField(max_length=500)
    active = models.BooleanField(default=True)

    class Meta:
        db_table = "banners"
        ordering = ["id"]

    def __str__(self):
        return self.title or f"Banner {self.pk}"
