# banners/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from banners.views import AdminBannerListView, BannerViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"banners", BannerViewSet, basename="banners")

urlpatterns = [
    path("admin/banners", AdminBannerListView.as_view(), name="admin-banners"),
    path("", include(router.urls)),
]
